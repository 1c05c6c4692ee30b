from __future__ import annotations

import pytest

from skirmish.core.rng import RNG


def test_same_seed_same_sequence() -> None:
    first = RNG(123)
    second = RNG(123)

    assert [first.randint(0, 100) for _ in range(20)] == [second.randint(0, 100) for _ in range(20)]


def test_coin_flip_produces_both_sides() -> None:
    rng = RNG(5)
    flips = {rng.coin_flip() for _ in range(100)}

    assert flips == {True, False}


def test_choice_rejects_empty_sequence() -> None:
    with pytest.raises(ValueError):
        RNG(1).choice([])


def test_export_and_restore_continue_the_stream() -> None:
    rng = RNG(99)
    rng.randint(0, 10)
    snapshot = rng.export_state()
    expected = [rng.randint(0, 1000) for _ in range(5)]

    restored = RNG(0)
    restored.restore_state(snapshot)

    assert snapshot["seed"] == 99
    assert [restored.randint(0, 1000) for _ in range(5)] == expected


def test_restore_rejects_malformed_state() -> None:
    rng = RNG(1)
    with pytest.raises(ValueError):
        rng.restore_state({"version": 3})
    with pytest.raises(ValueError):
        rng.restore_state({"version": 3, "internal": ["x"], "gauss_next": None})
    with pytest.raises(ValueError):
        rng.restore_state({"version": 3, "internal": [1, 2, 3], "gauss_next": None})
