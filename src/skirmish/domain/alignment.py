"""Alignment triangle and attack effectiveness."""
from __future__ import annotations

from typing import Dict

from skirmish.core.types import Alignment, Effectiveness

# Each alignment beats the one it maps to.
STRONG_AGAINST: Dict[Alignment, Alignment] = {
    "rock": "scissors",
    "scissors": "paper",
    "paper": "rock",
}

# Scaled by 10 so the damage formula stays in integer arithmetic.
EFFECTIVENESS_FACTORS: Dict[Effectiveness, int] = {
    "super": 20,
    "neutral": 10,
    "not_very": 5,
}

EFFECTIVENESS_COMMENTARY: Dict[Effectiveness, str] = {
    "super": "It's very effective.",
    "not_very": "It's not very effective.",
}


def effectiveness(attacker: Alignment, defender: Alignment) -> Effectiveness:
    if STRONG_AGAINST[attacker] == defender:
        return "super"
    if STRONG_AGAINST[defender] == attacker:
        return "not_very"
    return "neutral"


def effectiveness_factor(attacker: Alignment, defender: Alignment) -> int:
    return EFFECTIVENESS_FACTORS[effectiveness(attacker, defender)]
