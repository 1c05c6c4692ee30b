"""Actions repository."""
from __future__ import annotations

from typing import Dict, List

from skirmish.data.errors import DataValidationError
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.action_pool import ActionPool
from skirmish.domain.actions import Action, Bleed, DamagingAttack, Defend, FixedAttack, Stun

# Pool order groups actions by kind, as ids are positions in the pool.
KIND_ORDER = ("attack", "fixed_attack", "defend", "bleed", "stun")


class ActionsRepository(RepositoryBase[Action]):
    """Loads battle actions and lays them out as an ActionPool."""

    def __init__(self, base_path=None) -> None:
        super().__init__("actions.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Action]:
        actions: Dict[str, Action] = {}
        for raw_id, payload in raw.items():
            context = f"action '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, {"kind", "name"}, context)
            kind = data["kind"]
            name = self._require_str(data["name"], f"{context} name")

            if kind == "attack":
                self._assert_required(data, {"power", "alignment"}, context)
                actions[raw_id] = DamagingAttack(
                    name=name,
                    power=self._require_int(data["power"], f"{context} power", minimum=0),
                    alignment=self._require_alignment(data["alignment"], f"{context} alignment"),
                    priority=self._require_int(data.get("priority", 0), f"{context} priority"),
                )
            elif kind == "fixed_attack":
                self._assert_required(data, {"power"}, context)
                actions[raw_id] = FixedAttack(
                    name=name,
                    power=self._require_int(data["power"], f"{context} power", minimum=0),
                )
            elif kind == "defend":
                actions[raw_id] = Defend(name=name)
            elif kind == "bleed":
                self._assert_required(data, {"power"}, context)
                actions[raw_id] = Bleed(
                    name=name,
                    power=self._require_int(data["power"], f"{context} power", minimum=0),
                )
            elif kind == "stun":
                actions[raw_id] = Stun(name=name)
            else:
                raise DataValidationError(f"{context} kind must be one of {list(KIND_ORDER)}.")
        return actions

    def ordered_ids(self) -> List[str]:
        """Definition ids in pool order: by kind group, then by id."""
        definitions = self._ensure_loaded()
        return sorted(
            definitions,
            key=lambda def_id: (KIND_ORDER.index(_KIND_BY_TYPE[type(definitions[def_id])]), def_id),
        )

    def build_pool(self, padding: int = 0) -> ActionPool:
        definitions = self._ensure_loaded()
        return ActionPool([definitions[def_id] for def_id in self.ordered_ids()], padding=padding)


_KIND_BY_TYPE = {
    DamagingAttack: "attack",
    FixedAttack: "fixed_attack",
    Defend: "defend",
    Bleed: "bleed",
    Stun: "stun",
}
