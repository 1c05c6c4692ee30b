"""Decides which side acts first in a round."""
from __future__ import annotations

from skirmish.core.rng import RNG
from skirmish.core.types import Side
from skirmish.domain.actions import Action, action_priority
from skirmish.domain.entities import Character


def resolve_turn_order(
    player: Character,
    player_action: Action,
    enemy: Character,
    enemy_action: Action,
    rng: RNG,
) -> Side:
    """
    Return the side that acts first.

    Rules:
    - The action with the higher priority goes first
    - On a priority tie, the faster character goes first
    - On a full tie, a coin flip decides
    """
    player_priority = action_priority(player_action)
    enemy_priority = action_priority(enemy_action)
    if player_priority != enemy_priority:
        return "player" if player_priority > enemy_priority else "enemy"
    if player.priority() != enemy.priority():
        return "player" if player.priority() > enemy.priority() else "enemy"
    return "player" if rng.coin_flip() else "enemy"
