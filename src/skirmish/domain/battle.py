"""One-on-one battle turn engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from skirmish.core.rng import RNG
from skirmish.core.types import BattleStatus
from skirmish.domain.actions import Action
from skirmish.domain.entities import Character
from skirmish.domain.experience import experience_value, gain_experience
from skirmish.domain.status_engine import clean_up, take_turn


@dataclass(slots=True)
class Battle:
    """
    Holds the player and the enemy for the duration of a fight.

    The caller decides turn order, calls player_turn/enemy_turn, then
    end_turn once per round. Nothing here raises for game situations.
    """

    player: Character
    enemy: Character

    def battle_status(self) -> BattleStatus:
        # player loss wins a simultaneous knock-out
        if self.player.state.health == 0:
            return "defeat"
        if self.enemy.state.health == 0:
            return "victory"
        return "in_progress"

    def player_turn(self, action: Action, rng: RNG) -> List[str]:
        if self.battle_status() != "in_progress":
            return []
        return take_turn(self.player, self.enemy, action, rng)

    def enemy_turn(self, action: Action, rng: RNG) -> List[str]:
        if self.battle_status() != "in_progress":
            return []
        return take_turn(self.enemy, self.player, action, rng)

    def end_turn(self, rng: RNG) -> Tuple[BattleStatus, List[str]]:
        status = self.battle_status()
        logs: List[str] = []
        if status == "victory":
            logs.append(f"Defeated {self.enemy.name}!")
            reward = experience_value(self.enemy) // max(1, self.player.attributes.level)
            logs.extend(gain_experience(self.player, reward, rng))
        elif status == "defeat":
            logs.append(f"{self.player.name} died!")
        else:
            clean_up(self.player)
            clean_up(self.enemy)
        return status, logs
