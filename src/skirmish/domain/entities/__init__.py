"""Runtime entity exports."""

from .character import Attributes, Character, CombatState
from .species import Species
from .stats import STAT_NAMES, StatVector

__all__ = [
    "Attributes",
    "Character",
    "CombatState",
    "STAT_NAMES",
    "Species",
    "StatVector",
]
