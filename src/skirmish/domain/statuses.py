"""Status bookkeeping on a character's active status mapping."""
from __future__ import annotations

from typing import Dict, MutableMapping

from skirmish.core.types import StatusType

# Bleed and stun never coexist on the same character.
EXCLUSIVE_WITH: Dict[StatusType, StatusType] = {
    "bleed": "stun",
    "stun": "bleed",
}


def has_status(statuses: MutableMapping[StatusType, int], status: StatusType) -> bool:
    return status in statuses


def set_status(statuses: MutableMapping[StatusType, int], status: StatusType) -> None:
    """Activate a status without touching an existing intensity."""
    statuses.setdefault(status, 0)


def stack_status(statuses: MutableMapping[StatusType, int], status: StatusType, amount: int) -> bool:
    """
    Add `amount` intensity to a stacking status.

    Returns False, leaving the mapping untouched, when the mutually exclusive
    status is already active.
    """
    blocker = EXCLUSIVE_WITH.get(status)
    if blocker is not None and blocker in statuses:
        return False
    statuses[status] = statuses.get(status, 0) + amount
    return True


def clear_status(statuses: MutableMapping[StatusType, int], status: StatusType) -> bool:
    """Remove a status; returns True if it was active."""
    return statuses.pop(status, None) is not None
