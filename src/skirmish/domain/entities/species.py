"""Species definitions shared by every character of that kind."""
from __future__ import annotations

from dataclasses import dataclass

from skirmish.core.types import Alignment

from .stats import StatVector


@dataclass(frozen=True, slots=True)
class Species:
    """Immutable growth data: base stat total, stat ratios and alignment."""

    name: str
    bst: int
    base_stats: StatVector[float]
    alignment: Alignment
