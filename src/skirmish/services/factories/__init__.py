"""Factory exports."""

from .character_factory import (
    KNOWN_ACTION_COUNT,
    create_character,
    create_character_at_level,
    roll_known_actions,
    spawn_random_character,
)

__all__ = [
    "KNOWN_ACTION_COUNT",
    "create_character",
    "create_character_at_level",
    "roll_known_actions",
    "spawn_random_character",
]
