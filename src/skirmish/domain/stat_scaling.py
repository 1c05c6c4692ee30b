"""Integer scaling of stat ratio vectors."""
from __future__ import annotations

from fractions import Fraction
from typing import List

from skirmish.core.rng import RNG
from skirmish.domain.entities import STAT_NAMES, StatVector


def scale_stats(ratios: StatVector[float], total: int, rng: RNG) -> StatVector[int]:
    """
    Split `total` into integer stats proportional to `ratios`.

    Each component is floored in exact rational arithmetic first; the
    shortfall is then handed out one point at a time to components drawn
    uniformly at random (with repetition), so the result always sums to
    exactly `total`, however large. A zero ratio sum is treated as an equal
    split.
    """
    if total < 0:
        raise ValueError(f"Cannot scale stats to a negative total ({total}).")
    weights = [Fraction(value) for value in ratios.as_tuple()]
    if any(weight < 0 for weight in weights):
        raise ValueError(f"Stat ratios must be non-negative, got {ratios.as_tuple()}.")
    weight_sum = sum(weights)
    if weight_sum <= 0:
        weights = [Fraction(1)] * len(STAT_NAMES)
        weight_sum = Fraction(len(STAT_NAMES))

    values: List[int] = [total * weight // weight_sum for weight in weights]
    for _ in range(total - sum(values)):
        values[rng.randint(0, len(values) - 1)] += 1
    return StatVector.from_sequence(values)
