"""Factories for creating characters from species definitions."""
from __future__ import annotations

from typing import Iterable, List

from skirmish.core.rng import RNG
from skirmish.data.repositories import SpeciesRepository
from skirmish.domain.action_pool import ActionPool
from skirmish.domain.entities import Character, Species
from skirmish.domain.experience import stats_for_level
from skirmish.services.errors import FactoryError

KNOWN_ACTION_COUNT = 4


def create_character(
    species_id: str,
    species_repo: SpeciesRepository,
    actions: Iterable[int] = (),
) -> Character:
    """Instantiate a fresh (level 0) character of the requested species."""
    try:
        species = species_repo.get(species_id)
    except KeyError as exc:
        raise FactoryError(f"Species '{species_id}' not found.") from exc
    return Character.from_species_and_actions(species, actions)


def create_character_at_level(
    species: Species,
    level: int,
    actions: Iterable[int],
    rng: RNG,
) -> Character:
    """Instantiate a character with stats realized for `level`, ready for battle."""
    if level < 1:
        raise FactoryError(f"Level must be at least 1, got {level}.")
    character = Character.from_species_and_actions(species, actions)
    character.attributes.level = level
    character.attributes.stats = stats_for_level(species, level, rng)
    character.refresh()
    return character


def roll_known_actions(pool: ActionPool, rng: RNG, count: int = KNOWN_ACTION_COUNT) -> List[int]:
    """Draw action ids, padding included, so some may resolve to Skip."""
    return [pool.sample_id(rng) for _ in range(count)]


def spawn_random_character(species_repo: SpeciesRepository, pool: ActionPool, level: int, rng: RNG) -> Character:
    """Create a character of a random species at the given level with rolled actions."""
    species_ids = species_repo.ids()
    if not species_ids:
        raise FactoryError("No species definitions available.")
    species = species_repo.get(rng.choice(species_ids))
    return create_character_at_level(species, max(1, level), roll_known_actions(pool, rng), rng)
