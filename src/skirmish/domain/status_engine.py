"""Status effects that wrap action execution and end-of-round cleanup."""
from __future__ import annotations

from typing import List

from skirmish.core.rng import RNG
from skirmish.domain.actions import Action, apply_action
from skirmish.domain.damage import deal_damage
from skirmish.domain.entities import Character
from skirmish.domain.statuses import clear_status


def take_turn(user: Character, target: Character, action: Action, rng: RNG) -> List[str]:
    """
    Run `action` for `user`, consulting the user's own statuses first.

    Stunned users recover with probability 1/(intensity + 1) and then act;
    otherwise they lose the turn. Bleeding users act, then lose health equal
    to their bleed intensity. Bleed and stun never coexist.
    """
    statuses = user.state.statuses
    if "stun" in statuses:
        if rng.randint(0, statuses["stun"]) == 0:
            clear_status(statuses, "stun")
            logs = [f"{user.name} is no longer stunned."]
            logs.extend(apply_action(action, user, target))
            return logs
        return [f"{user.name} is stunned."]
    if "bleed" in statuses:
        logs = apply_action(action, user, target)
        deal_damage(user, statuses.get("bleed", 0))
        logs.append(f"{user.name} was hurt by bleed.")
        return logs
    return apply_action(action, user, target)


def clean_up(character: Character) -> bool:
    """Drop statuses that only last one round. Returns True if any were removed."""
    return clear_status(character.state.statuses, "defend")
