from __future__ import annotations

import pytest

from skirmish.core.rng import RNG
from skirmish.domain.action_pool import ActionPool
from skirmish.domain.actions import SKIP, Defend, FixedAttack

BURST = FixedAttack(name="Burst", power=20)
BLOCK = Defend(name="Block")


def test_resolves_ids_in_range() -> None:
    pool = ActionPool([BURST, BLOCK])

    assert len(pool) == 2
    assert pool.resolve(0) == BURST
    assert pool[1] == BLOCK
    assert list(pool) == [BURST, BLOCK]


def test_out_of_range_ids_resolve_to_skip() -> None:
    pool = ActionPool([BURST])

    assert pool.resolve(1) is SKIP
    assert pool.resolve(-1) is SKIP
    assert pool.resolve(10_000) is SKIP
    assert pool.resolve(True) is SKIP
    assert pool.resolve("0") is SKIP
    assert pool.resolve_all([0, 5]) == [BURST, SKIP]


def test_sample_id_covers_padding() -> None:
    pool = ActionPool([BURST, BLOCK], padding=3)
    rng = RNG(11)

    seen = {pool.sample_id(rng) for _ in range(200)}

    assert seen == {0, 1, 2, 3, 4}
    assert pool.padding == 3


def test_empty_pool_samples_an_id_that_resolves_to_skip() -> None:
    pool = ActionPool()

    assert pool.resolve(pool.sample_id(RNG(1))) is SKIP


def test_negative_padding_is_rejected() -> None:
    with pytest.raises(ValueError):
        ActionPool([BURST], padding=-1)
