"""Console-driven UI loops for Skirmish."""
from __future__ import annotations

import secrets
from typing import Any, Dict, List, Literal

from skirmish.core.rng import RNG
from skirmish.data.errors import DataLoadError
from skirmish.data.repositories import ActionsRepository, SpeciesRepository
from skirmish.domain.state import GameState
from skirmish.presentation.cli import render
from skirmish.presentation.cli.config import load_config
from skirmish.presentation.cli.save_slots import SaveSlotStore
from skirmish.services import BattleService, SaveLoadError, SaveService
from skirmish.services.factories import create_character_at_level, roll_known_actions, spawn_random_character

MenuAction = Literal["new_game", "load_game", "quit"]
CampAction = Literal["battle", "status", "save", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1
# Extra pool ids that resolve to Skip, so freshly rolled characters may know a dud move.
ACTION_POOL_PADDING = 3


def main() -> None:
    """Start the interactive CLI session."""
    config = load_config()
    species_repo = SpeciesRepository()
    battle_service = BattleService(ActionsRepository().build_pool(padding=ACTION_POOL_PADDING))
    save_service = SaveService()
    slots = SaveSlotStore()
    print("=== Skirmish ===")
    while True:
        action = _main_menu_loop()
        if action == "quit":
            break
        if action == "load_game":
            state = _load_game(save_service, slots)
            if state is None:
                continue
        else:
            state = _start_new_game(species_repo, battle_service, config)
            if state is None:
                continue
        if not _run_camp_loop(state, species_repo, battle_service, save_service, slots, config):
            break
    print("Goodbye!")


def _main_menu_loop() -> MenuAction:
    while True:
        render.render_menu("Main Menu", ["New Game", "Load Game", "Quit"])
        choice = input("Select an option: ").strip()
        if choice == "1":
            return "new_game"
        if choice == "2":
            return "load_game"
        if choice == "3":
            return "quit"
        print("Invalid selection. Please enter 1, 2 or 3.")


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")


def _start_new_game(
    species_repo: SpeciesRepository, battle_service: BattleService, config: Dict[str, Any]
) -> GameState | None:
    all_species = species_repo.all()
    if not all_species:
        print("No species are defined. Check the species definitions file.")
        return None
    seed = _prompt_seed()
    rng = RNG(seed)
    render.render_menu(
        "Choose your species",
        [f"{species.name} ({species.alignment.title()}, BST {species.bst})" for species in all_species],
    )
    species = all_species[_prompt_choice(len(all_species))]
    player = create_character_at_level(
        species,
        config["starting_level"],
        roll_known_actions(battle_service.action_pool, rng),
        rng,
    )
    print(f"Game started with seed: {seed}")
    return GameState(seed=seed, rng=rng, mode="camp", player=player)


def _roll_new_player(
    state: GameState, species_repo: SpeciesRepository, battle_service: BattleService, config: Dict[str, Any]
) -> None:
    state.player = spawn_random_character(species_repo, battle_service.action_pool, config["starting_level"], state.rng)
    print(f"A new challenger steps in: {state.player.name}.")


def _run_camp_loop(
    state: GameState,
    species_repo: SpeciesRepository,
    battle_service: BattleService,
    save_service: SaveService,
    slots: SaveSlotStore,
    config: Dict[str, Any],
) -> bool:
    """Returns False when the player quits the program."""
    options: List[CampAction] = ["battle", "status", "save", "quit"]
    while True:
        if state.mode == "battle" and state.battle is not None:
            _run_battle_loop(state, species_repo, battle_service, config)
            continue
        assert state.player is not None
        render.render_menu("Camp", ["Battle", "Status", "Save", "Quit"])
        action = options[_prompt_choice(len(options))]
        if action == "battle":
            enemy = spawn_random_character(
                species_repo, battle_service.action_pool, state.player.attributes.level, state.rng
            )
            state.battle, logs = battle_service.start_battle(state.player, enemy)
            state.mode = "battle"
            render.render_log_lines(logs)
        elif action == "status":
            render.render_status(state.player)
            for option in battle_service.known_actions(state.player):
                print(f"  * {render.format_action_option(option)}")
        elif action == "save":
            _save_game(state, save_service, slots)
        else:
            return False


def _run_battle_loop(
    state: GameState,
    species_repo: SpeciesRepository,
    battle_service: BattleService,
    config: Dict[str, Any],
) -> None:
    battle = state.battle
    assert battle is not None
    step = config["text_display_mode"] == "step"
    while True:
        render.render_battle_panel(battle.player, battle.enemy)
        known_ids = list(battle.player.attributes.actions)
        labels = [render.format_action_option(battle_service.action_pool[action_id]) for action_id in known_ids]
        render.render_menu("Actions", labels + ["Run away"])
        index = _prompt_choice(len(labels) + 1)
        if index == len(labels):
            render.render_log_lines(battle_service.flee(battle), step=step)
            state.player = battle.player
            break
        result = battle_service.play_round(battle, known_ids[index], state.rng)
        render.render_log_lines(result.logs, step=step)
        if result.status == "victory":
            state.player = battle_service.finish_battle(battle)
            state.victories += 1
            break
        if result.status == "defeat":
            _roll_new_player(state, species_repo, battle_service, config)
            break
    state.battle = None
    state.mode = "camp"


def _save_game(state: GameState, save_service: SaveService, slots: SaveSlotStore) -> None:
    _render_slots(slots)
    slot = _prompt_choice(slots.slot_count) + 1
    slots.write_slot(slot, save_service.serialize(state))
    print(f"Saved to slot {slot}.")


def _load_game(save_service: SaveService, slots: SaveSlotStore) -> GameState | None:
    _render_slots(slots)
    slot = _prompt_choice(slots.slot_count) + 1
    if not slots.slot_exists(slot):
        print("That slot is empty.")
        return None
    try:
        state = save_service.deserialize(slots.read_slot(slot))
    except (DataLoadError, SaveLoadError) as exc:
        print(f"Could not load slot {slot}: {exc}")
        return None
    if state.player is None:
        print("That save has no character.")
        return None
    print(f"Loaded {state.player.name} (level {state.player.attributes.level}).")
    return state


def _render_slots(slots: SaveSlotStore) -> None:
    labels: List[str] = []
    for entry in slots.list_slots():
        if not entry.exists:
            labels.append("(empty)")
        elif entry.is_corrupt or entry.metadata is None:
            labels.append("(corrupt)")
        else:
            labels.append(
                f"{entry.metadata.get('player_name')} Lv{entry.metadata.get('player_level')} "
                f"- {entry.metadata.get('saved_at')}"
            )
    render.render_menu("Save Slots", labels)
