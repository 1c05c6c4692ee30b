"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass

from skirmish.core.rng import RNG
from skirmish.core.types import GameMode
from skirmish.domain.battle import Battle
from skirmish.domain.entities import Character


@dataclass
class GameState:
    """Everything a play session needs to resume: RNG, player and any open battle."""

    seed: int
    rng: RNG
    mode: GameMode
    player: Character | None = None
    battle: Battle | None = None
    victories: int = 0
