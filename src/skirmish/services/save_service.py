"""Serialization helpers for manual save/load."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from skirmish.core.rng import RNG, RNGStatePayload
from skirmish.core.types import ALIGNMENTS, STATUS_TYPES, Alignment, GameMode, StatusType
from skirmish.domain.battle import Battle
from skirmish.domain.entities import STAT_NAMES, Attributes, Character, CombatState, Species, StatVector
from skirmish.domain.experience import EXPERIENCE_TO_LEVEL
from skirmish.domain.state import GameState
from skirmish.services.errors import SaveLoadError

SavePayload = Dict[str, Any]
_VALID_MODES: tuple[GameMode, ...] = ("camp", "battle")


class SaveService:
    """Converts runtime state to/from a validated, versioned payload.

    Every character field round-trips exactly, including species ratios,
    known action ids and the active status mapping.
    """

    SAVE_VERSION = 1

    def serialize(self, state: GameState) -> SavePayload:
        """Return a JSON-serializable payload for disk persistence."""
        return {
            "save_version": self.SAVE_VERSION,
            "metadata": self._build_metadata(state),
            "rng": state.rng.export_state(),
            "state": {
                "seed": state.seed,
                "mode": state.mode,
                "victories": state.victories,
                "player": self.serialize_character(state.player) if state.player else None,
                "battle": self.serialize_battle(state.battle) if state.battle else None,
            },
        }

    def deserialize(self, payload: Mapping[str, Any]) -> GameState:
        """Rehydrate a GameState + RNG from a persisted payload."""
        if not isinstance(payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        if payload.get("save_version") != self.SAVE_VERSION:
            raise SaveLoadError("Unsupported save format. Please start a new game.")
        rng_payload = payload.get("rng")
        state_payload = payload.get("state")
        if not isinstance(rng_payload, Mapping) or not isinstance(state_payload, Mapping):
            raise SaveLoadError("Save data is missing required sections.")

        seed = self._require_int(state_payload.get("seed"), "state.seed")
        rng = RNG(seed)
        try:
            rng.restore_state(self._coerce_rng_payload(rng_payload))
        except ValueError as exc:
            raise SaveLoadError(f"Invalid RNG state: {exc}") from exc

        mode = self._require_mode(state_payload.get("mode"))
        player_payload = state_payload.get("player")
        battle_payload = state_payload.get("battle")
        player = self.deserialize_character(player_payload, "state.player") if player_payload is not None else None
        battle = self.deserialize_battle(battle_payload, "state.battle") if battle_payload is not None else None
        if mode == "battle" and battle is None:
            raise SaveLoadError("state.battle is required while in battle mode.")
        if battle is not None:
            # the battle owns the player for its duration
            player = battle.player

        return GameState(
            seed=seed,
            rng=rng,
            mode=mode,
            player=player,
            battle=battle,
            victories=self._require_non_negative_int(state_payload.get("victories", 0), "state.victories"),
        )

    # -----------------------
    # Characters and battles
    # -----------------------
    def serialize_battle(self, battle: Battle) -> Dict[str, Any]:
        return {
            "player": self.serialize_character(battle.player),
            "enemy": self.serialize_character(battle.enemy),
        }

    def deserialize_battle(self, value: Any, context: str = "battle") -> Battle:
        mapping = self._require_dict(value, context)
        return Battle(
            player=self.deserialize_character(mapping.get("player"), f"{context}.player"),
            enemy=self.deserialize_character(mapping.get("enemy"), f"{context}.enemy"),
        )

    def serialize_character(self, character: Character) -> Dict[str, Any]:
        species = character.species
        attributes = character.attributes
        return {
            "name": character.name,
            "species": {
                "name": species.name,
                "bst": species.bst,
                "base_stats": self._serialize_stats(species.base_stats),
                "alignment": species.alignment,
            },
            "attributes": {
                "level": attributes.level,
                "experience": attributes.experience,
                "stats": self._serialize_stats(attributes.stats),
                "actions": list(attributes.actions),
            },
            "state": {
                "alignment": character.state.alignment,
                "health": character.state.health,
                "statuses": dict(character.state.statuses),
            },
        }

    def deserialize_character(self, value: Any, context: str = "character") -> Character:
        mapping = self._require_dict(value, context)
        species_map = self._require_dict(mapping.get("species"), f"{context}.species")
        species = Species(
            name=self._require_str(species_map.get("name"), f"{context}.species.name"),
            bst=self._require_non_negative_int(species_map.get("bst"), f"{context}.species.bst"),
            base_stats=self._coerce_ratio_stats(species_map.get("base_stats"), f"{context}.species.base_stats"),
            alignment=self._require_alignment(species_map.get("alignment"), f"{context}.species.alignment"),
        )

        attributes_map = self._require_dict(mapping.get("attributes"), f"{context}.attributes")
        experience = self._require_non_negative_int(
            attributes_map.get("experience"), f"{context}.attributes.experience"
        )
        if experience >= EXPERIENCE_TO_LEVEL:
            raise SaveLoadError(f"{context}.attributes.experience must be below {EXPERIENCE_TO_LEVEL}.")
        attributes = Attributes(
            level=self._require_non_negative_int(attributes_map.get("level"), f"{context}.attributes.level"),
            experience=experience,
            stats=self._coerce_int_stats(attributes_map.get("stats"), f"{context}.attributes.stats"),
            actions=self._coerce_int_list(attributes_map.get("actions"), f"{context}.attributes.actions"),
        )

        state_map = self._require_dict(mapping.get("state"), f"{context}.state")
        health = self._require_non_negative_int(state_map.get("health"), f"{context}.state.health")
        if health > attributes.stats.health:
            raise SaveLoadError(f"{context}.state.health exceeds maximum health {attributes.stats.health}.")
        state = CombatState(
            alignment=self._require_alignment(state_map.get("alignment"), f"{context}.state.alignment"),
            health=health,
            statuses=self._coerce_statuses(state_map.get("statuses"), f"{context}.state.statuses"),
        )

        return Character(
            name=self._require_str(mapping.get("name"), f"{context}.name"),
            species=species,
            attributes=attributes,
            state=state,
        )

    # -----------------------
    # Helpers
    # -----------------------
    def _build_metadata(self, state: GameState) -> Dict[str, Any]:
        player = state.player
        return {
            "saved_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "player_name": player.name if player else None,
            "player_level": player.attributes.level if player else None,
            "mode": state.mode,
            "victories": state.victories,
        }

    @staticmethod
    def _serialize_stats(stats: StatVector) -> Dict[str, Any]:
        return dict(zip(STAT_NAMES, stats.as_tuple()))

    def _coerce_rng_payload(self, payload: Mapping[str, Any]) -> RNGStatePayload:
        internal = payload.get("internal")
        if not isinstance(internal, list):
            raise SaveLoadError("rng.internal must be a list.")
        return dict(payload)

    def _coerce_int_stats(self, value: Any, context: str) -> StatVector[int]:
        mapping = self._require_dict(value, context)
        return StatVector.from_sequence(
            [self._require_non_negative_int(mapping.get(name), f"{context}.{name}") for name in STAT_NAMES]
        )

    def _coerce_ratio_stats(self, value: Any, context: str) -> StatVector[float]:
        mapping = self._require_dict(value, context)
        ratios: List[float] = []
        for name in STAT_NAMES:
            raw = mapping.get(name)
            if isinstance(raw, bool) or not isinstance(raw, (int, float)) or raw < 0:
                raise SaveLoadError(f"{context}.{name} must be a non-negative number.")
            ratios.append(float(raw))
        return StatVector.from_sequence(ratios)

    def _coerce_statuses(self, value: Any, context: str) -> Dict[StatusType, int]:
        mapping = self._require_dict(value, context)
        statuses: Dict[StatusType, int] = {}
        for key, raw in mapping.items():
            if key not in STATUS_TYPES:
                raise SaveLoadError(f"{context} has unknown status '{key}'.")
            statuses[key] = self._require_non_negative_int(raw, f"{context}.{key}")
        if "bleed" in statuses and "stun" in statuses:
            raise SaveLoadError(f"{context} cannot hold both bleed and stun.")
        return statuses

    def _coerce_int_list(self, value: Any, context: str) -> List[int]:
        if not isinstance(value, list):
            raise SaveLoadError(f"{context} must be a list.")
        return [self._require_int(entry, f"{context}[{index}]") for index, entry in enumerate(value)]

    def _require_mode(self, value: Any) -> GameMode:
        if value not in _VALID_MODES:
            raise SaveLoadError(f"state.mode must be one of {list(_VALID_MODES)}.")
        return value

    @staticmethod
    def _require_alignment(value: Any, context: str) -> Alignment:
        if value not in ALIGNMENTS:
            raise SaveLoadError(f"{context} must be one of {list(ALIGNMENTS)}.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: Any, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SaveLoadError(f"{context} must be an integer.")
        return value

    def _require_non_negative_int(self, value: Any, context: str) -> int:
        number = self._require_int(value, context)
        if number < 0:
            raise SaveLoadError(f"{context} must be non-negative.")
        return number

    @staticmethod
    def _require_dict(value: Any, context: str) -> Dict[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return dict(value)
