from __future__ import annotations

import itertools

import pytest

from skirmish.core.types import ALIGNMENTS
from skirmish.domain.alignment import EFFECTIVENESS_FACTORS, effectiveness, effectiveness_factor

EXPECTED = {
    ("rock", "rock"): "neutral",
    ("rock", "paper"): "not_very",
    ("rock", "scissors"): "super",
    ("paper", "rock"): "super",
    ("paper", "paper"): "neutral",
    ("paper", "scissors"): "not_very",
    ("scissors", "rock"): "not_very",
    ("scissors", "paper"): "super",
    ("scissors", "scissors"): "neutral",
}


@pytest.mark.parametrize(("attacker", "defender"), list(itertools.product(ALIGNMENTS, ALIGNMENTS)))
def test_effectiveness_table_is_total(attacker: str, defender: str) -> None:
    assert effectiveness(attacker, defender) == EXPECTED[(attacker, defender)]


def test_effectiveness_is_antisymmetric_across_the_cycle() -> None:
    for attacker, defender in itertools.permutations(ALIGNMENTS, 2):
        if effectiveness(attacker, defender) == "super":
            assert effectiveness(defender, attacker) == "not_very"
        if effectiveness(attacker, defender) == "not_very":
            assert effectiveness(defender, attacker) == "super"


def test_effectiveness_factors() -> None:
    assert EFFECTIVENESS_FACTORS == {"super": 20, "neutral": 10, "not_very": 5}
    assert effectiveness_factor("rock", "scissors") == 20
    assert effectiveness_factor("rock", "paper") == 5
    assert effectiveness_factor("rock", "rock") == 10
