"""Character runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from skirmish.core.types import Alignment, StatusType

from .species import Species
from .stats import StatVector


@dataclass(slots=True)
class Attributes:
    """Progression that persists across battles."""

    level: int = 0
    experience: int = 0
    stats: StatVector[int] = field(default_factory=StatVector.zero)
    actions: List[int] = field(default_factory=list)


@dataclass(slots=True)
class CombatState:
    """Per-battle state, rebuilt by Character.refresh()."""

    alignment: Alignment
    health: int = 0
    statuses: Dict[StatusType, int] = field(default_factory=dict)


@dataclass(slots=True)
class Character:
    """A species instance with its own progression and battle state."""

    name: str
    species: Species
    attributes: Attributes
    state: CombatState

    @classmethod
    def from_species(cls, species: Species) -> "Character":
        return cls(
            name=species.name,
            species=species,
            attributes=Attributes(),
            state=CombatState(alignment=species.alignment),
        )

    @classmethod
    def from_species_and_actions(cls, species: Species, actions: Iterable[int]) -> "Character":
        character = cls.from_species(species)
        character.attributes.actions = list(actions)
        return character

    def priority(self) -> int:
        """Speed used to break turn-order ties."""
        return self.attributes.stats.speed

    def refresh(self) -> None:
        """Reset battle state from realized stats and the species alignment."""
        self.state.alignment = self.species.alignment
        self.state.health = self.attributes.stats.health
        self.state.statuses = {}
