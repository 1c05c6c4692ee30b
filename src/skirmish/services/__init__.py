"""Service layer exports."""

from .battle_service import BattleService, RoundResult
from .errors import FactoryError, SaveLoadError
from .save_service import SaveService
from .turn_order import resolve_turn_order

__all__ = [
    "BattleService",
    "FactoryError",
    "RoundResult",
    "SaveLoadError",
    "SaveService",
    "resolve_turn_order",
]
