"""Repository exports."""

from .actions_repo import ActionsRepository
from .base import RepositoryBase
from .species_repo import SpeciesRepository

__all__ = [
    "ActionsRepository",
    "RepositoryBase",
    "SpeciesRepository",
]
