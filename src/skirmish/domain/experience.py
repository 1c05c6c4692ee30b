"""Experience rewards and level-up growth."""
from __future__ import annotations

from typing import List

from skirmish.core.rng import RNG
from skirmish.domain.entities import Character, Species, StatVector
from skirmish.domain.stat_scaling import scale_stats

BASE_EXPERIENCE = 31
EXPERIENCE_TO_LEVEL = 100
SCALING_FACTOR = 100


def log2_floor(value: int) -> int:
    """floor(log2(value)) for positive integers, 0 otherwise."""
    if value <= 0:
        return 0
    return value.bit_length() - 1


def experience_value(character: Character) -> int:
    """Experience a character is worth when defeated."""
    level = character.attributes.level
    bst = character.species.bst
    if level == 0 or bst == 0:
        return 0
    bst_term = bst * log2_floor(bst + 1)
    level_term = level // log2_floor(level + 1)
    return bst_term * level_term // BASE_EXPERIENCE


def growth_increment(species: Species, rng: RNG) -> StatVector[int]:
    return scale_stats(species.base_stats, SCALING_FACTOR, rng)


def stats_for_level(species: Species, level: int, rng: RNG) -> StatVector[int]:
    """Realized stats recomputed from scratch for a species at `level`."""
    return scale_stats(species.base_stats, max(0, level) * SCALING_FACTOR, rng)


def gain_experience(character: Character, amount: int, rng: RNG) -> List[str]:
    """
    Add experience, absorbing every full EXPERIENCE_TO_LEVEL into levels.

    Stats grow by a single increment per call that crosses at least one
    level, however many levels were gained.
    """
    attributes = character.attributes
    logs = [f"Gained {amount} experience!"]
    total = attributes.experience + amount
    levels_gained = total // EXPERIENCE_TO_LEVEL
    attributes.experience = total % EXPERIENCE_TO_LEVEL
    attributes.level += levels_gained
    if levels_gained > 0:
        logs.append(f"{character.name} grew to level {attributes.level}!")
        growth = growth_increment(character.species, rng)
        attributes.stats = attributes.stats + growth
        logs.append(f"Stats increased by {growth}.")
    return logs
