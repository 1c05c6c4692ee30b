"""Shared type aliases for the core and domain layers."""
from typing import Literal

Alignment = Literal["rock", "paper", "scissors"]
StatusType = Literal["defend", "bleed", "stun"]
BattleStatus = Literal["in_progress", "victory", "defeat"]
Effectiveness = Literal["super", "not_very", "neutral"]
Side = Literal["player", "enemy"]
GameMode = Literal["camp", "battle"]

ALIGNMENTS: tuple[Alignment, ...] = ("rock", "paper", "scissors")
STATUS_TYPES: tuple[StatusType, ...] = ("defend", "bleed", "stun")

__all__ = [
    "ALIGNMENTS",
    "Alignment",
    "BattleStatus",
    "Effectiveness",
    "GameMode",
    "STATUS_TYPES",
    "Side",
    "StatusType",
]
