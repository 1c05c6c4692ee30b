"""Battle service driving rounds between a player and an enemy."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from skirmish.core.rng import RNG
from skirmish.core.types import BattleStatus, Side
from skirmish.domain.action_pool import ActionPool
from skirmish.domain.actions import Action
from skirmish.domain.battle import Battle
from skirmish.domain.entities import Character
from skirmish.services.turn_order import resolve_turn_order

# Never a valid pool position, so it always resolves to Skip.
NO_ACTION_ID = -1


@dataclass(slots=True)
class RoundResult:
    """Outcome of one full round."""

    status: BattleStatus
    first: Side | None
    logs: List[str] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.status != "in_progress"


class BattleService:
    """Resolves action ids through the shared pool and plays rounds in order."""

    def __init__(self, action_pool: ActionPool) -> None:
        self._pool = action_pool

    @property
    def action_pool(self) -> ActionPool:
        return self._pool

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self, player: Character, enemy: Character) -> Tuple[Battle, List[str]]:
        player.refresh()
        enemy.refresh()
        battle = Battle(player=player, enemy=enemy)
        return battle, [f"{enemy.name} appeared!"]

    def flee(self, battle: Battle) -> List[str]:
        """The player runs away: no reward, battle state is reset."""
        battle.player.refresh()
        return [f"{battle.player.name} ran away!"]

    def finish_battle(self, battle: Battle) -> Character:
        """Return the refreshed player once the fight is over."""
        battle.player.refresh()
        return battle.player

    # -----------------------
    # Actions
    # -----------------------
    def known_actions(self, character: Character) -> List[Action]:
        return self._pool.resolve_all(character.attributes.actions)

    def choose_enemy_action(self, battle: Battle, rng: RNG) -> int:
        actions = battle.enemy.attributes.actions
        if not actions:
            return NO_ACTION_ID
        return rng.choice(actions)

    def play_round(
        self,
        battle: Battle,
        player_action_id: int,
        rng: RNG,
        enemy_action_id: int | None = None,
    ) -> RoundResult:
        """Run both turns in priority order, then end the round."""
        status = battle.battle_status()
        if status != "in_progress":
            return RoundResult(status=status, first=None)

        if enemy_action_id is None:
            enemy_action_id = self.choose_enemy_action(battle, rng)
        player_action = self._pool.resolve(player_action_id)
        enemy_action = self._pool.resolve(enemy_action_id)

        first = resolve_turn_order(battle.player, player_action, battle.enemy, enemy_action, rng)
        logs: List[str] = []
        if first == "player":
            logs.extend(battle.player_turn(player_action, rng))
            logs.extend(battle.enemy_turn(enemy_action, rng))
        else:
            logs.extend(battle.enemy_turn(enemy_action, rng))
            logs.extend(battle.player_turn(player_action, rng))

        status, end_logs = battle.end_turn(rng)
        logs.extend(end_logs)
        return RoundResult(status=status, first=first, logs=logs)
