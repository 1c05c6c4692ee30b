"""Species repository."""
from __future__ import annotations

from typing import Dict

from skirmish.data.errors import DataValidationError
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.entities import STAT_NAMES, Species, StatVector


class SpeciesRepository(RepositoryBase[Species]):
    """Loads species growth data."""

    def __init__(self, base_path=None) -> None:
        super().__init__("species.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Species]:
        species: Dict[str, Species] = {}
        for raw_id, payload in raw.items():
            context = f"species '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, {"name", "bst", "base_stats", "alignment"}, context)

            ratios_data = self._require_mapping(data["base_stats"], f"{context} base_stats")
            self._assert_required(ratios_data, set(STAT_NAMES), f"{context} base_stats")
            ratios = StatVector.from_sequence(
                [self._require_number(ratios_data[name], f"{context} base_stats.{name}") for name in STAT_NAMES]
            )
            if ratios.total() <= 0:
                raise DataValidationError(f"{context} base_stats must have a positive sum.")

            species[raw_id] = Species(
                name=self._require_str(data["name"], f"{context} name"),
                bst=self._require_int(data["bst"], f"{context} bst", minimum=0),
                base_stats=ratios,
                alignment=self._require_alignment(data["alignment"], f"{context} alignment"),
            )
        return species
