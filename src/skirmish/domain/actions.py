"""Battle actions as a closed set of variants.

Every action is a frozen dataclass; behaviour is dispatched on the variant by
the module-level functions below so the pool can stay plain data.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from skirmish.core.types import Alignment
from skirmish.domain.alignment import EFFECTIVENESS_COMMENTARY, effectiveness
from skirmish.domain.damage import compute_attack_damage, deal_damage
from skirmish.domain.entities import Character
from skirmish.domain.statuses import has_status, set_status, stack_status

DEFEND_PRIORITY = 2


@dataclass(frozen=True, slots=True)
class DamagingAttack:
    """Aligned attack scaled by level, stats, STAB and effectiveness."""

    name: str
    power: int
    alignment: Alignment
    priority: int = 0


@dataclass(frozen=True, slots=True)
class FixedAttack:
    """Attack that removes exactly `power` health."""

    name: str
    power: int


@dataclass(frozen=True, slots=True)
class Defend:
    name: str


@dataclass(frozen=True, slots=True)
class Bleed:
    name: str
    power: int


@dataclass(frozen=True, slots=True)
class Stun:
    name: str


@dataclass(frozen=True, slots=True)
class Skip:
    name: str = "Skip"


Action = Union[DamagingAttack, FixedAttack, Defend, Bleed, Stun, Skip]

SKIP = Skip()


def action_priority(action: Action) -> int:
    """Higher priority acts first within a round."""
    if isinstance(action, DamagingAttack):
        return action.priority
    if isinstance(action, Defend):
        return DEFEND_PRIORITY
    return 0


def describe_action(action: Action) -> str:
    if isinstance(action, DamagingAttack):
        text = f"{action.alignment.title()}-aligned attack with {action.power} power."
        if action.priority > 0:
            text += "\nHas priority."
        return text
    if isinstance(action, FixedAttack):
        return f"Attack for exactly {action.power} damage."
    if isinstance(action, Defend):
        return "Defend against attacks."
    if isinstance(action, Bleed):
        return f"Applies {action.power} bleeding to the enemy."
    if isinstance(action, Stun):
        return "Stuns the enemy."
    if isinstance(action, Skip):
        return "User skips their next turn."
    return action.name


def apply_action(action: Action, user: Character, target: Character) -> List[str]:
    """Resolve the action's effect on user and target and return log lines."""
    if isinstance(action, DamagingAttack):
        return _apply_damaging_attack(action, user, target)
    if isinstance(action, FixedAttack):
        return _apply_fixed_attack(action, user, target)
    if isinstance(action, Defend):
        set_status(user.state.statuses, "defend")
        return [f"{user.name} is defending."]
    if isinstance(action, Bleed):
        return _apply_bleed(action, user, target)
    if isinstance(action, Stun):
        return _apply_stun(action, user, target)
    if isinstance(action, Skip):
        return [f"{user.name} used {action.name}."]
    raise TypeError(f"Unsupported action variant: {type(action).__name__}")


def _apply_damaging_attack(action: DamagingAttack, user: Character, target: Character) -> List[str]:
    logs = [f"{user.name} used {action.name}."]
    if has_status(target.state.statuses, "defend"):
        logs.append(f"{target.name} blocked {user.name}'s {action.name}.")
        return logs
    commentary = EFFECTIVENESS_COMMENTARY.get(effectiveness(action.alignment, target.state.alignment))
    if commentary:
        logs.append(commentary)
    deal_damage(target, compute_attack_damage(user, target, action))
    return logs


def _apply_fixed_attack(action: FixedAttack, user: Character, target: Character) -> List[str]:
    logs = [f"{user.name} used {action.name}."]
    if has_status(target.state.statuses, "defend"):
        logs.append(f"{target.name} blocked {user.name}'s attack.")
        return logs
    deal_damage(target, action.power)
    return logs


def _apply_bleed(action: Bleed, user: Character, target: Character) -> List[str]:
    logs = [f"{user.name} used {action.name}."]
    if stack_status(target.state.statuses, "bleed", action.power):
        logs.append(f"{target.name} gained {action.power} bleeding.")
    else:
        logs.append(f"But {target.name} is stunned. It fails.")
    return logs


def _apply_stun(action: Stun, user: Character, target: Character) -> List[str]:
    logs = [f"{user.name} used {action.name}."]
    if stack_status(target.state.statuses, "stun", 1):
        logs.append(f"{target.name} is stunned.")
    else:
        logs.append(f"But {target.name} is bleeding. It fails.")
    return logs
