"""Flat, read-only arena of actions addressed by integer ids."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from skirmish.core.rng import RNG
from skirmish.domain.actions import SKIP, Action


class ActionPool:
    """
    Indexable pool shared by every character and battle.

    Characters only store ids. Ids outside the pool, including the
    `padding` range that `sample_id` may draw from, resolve to Skip.
    """

    def __init__(self, actions: Sequence[Action] = (), padding: int = 0) -> None:
        if padding < 0:
            raise ValueError("padding must be non-negative.")
        self._actions: tuple[Action, ...] = tuple(actions)
        self._padding = padding

    @property
    def padding(self) -> int:
        return self._padding

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self._actions)

    def __getitem__(self, action_id: object) -> Action:
        return self.resolve(action_id)

    def resolve(self, action_id: object) -> Action:
        if isinstance(action_id, bool) or not isinstance(action_id, int):
            return SKIP
        if 0 <= action_id < len(self._actions):
            return self._actions[action_id]
        return SKIP

    def resolve_all(self, action_ids: Iterable[object]) -> List[Action]:
        return [self.resolve(action_id) for action_id in action_ids]

    def sample_id(self, rng: RNG) -> int:
        upper = len(self._actions) + self._padding
        if upper == 0:
            return 0
        return rng.randint(0, upper - 1)
