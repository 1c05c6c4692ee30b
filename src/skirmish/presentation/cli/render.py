"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from skirmish.domain.actions import Action, action_priority, describe_action
from skirmish.domain.entities import Character
from skirmish.domain.experience import EXPERIENCE_TO_LEVEL


def debug_enabled() -> bool:
    """Return True only when SKIRMISH_DEBUG is explicitly set to '1'."""
    return os.getenv("SKIRMISH_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def health_bar(current: int, maximum: int, width: int = 20) -> str:
    if maximum <= 0:
        return "[" + " " * width + "]"
    filled = round(width * max(0, min(current, maximum)) / maximum)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def format_character_line(character: Character) -> str:
    state = character.state
    line = (
        f"{character.name} Lv{character.attributes.level} ({state.alignment.title()}) "
        f"{health_bar(state.health, character.attributes.stats.health)} "
        f"{state.health}/{character.attributes.stats.health}"
    )
    if state.statuses:
        line += " " + ", ".join(f"{status}:{value}" for status, value in sorted(state.statuses.items()))
    return line


def format_action_option(action: Action) -> str:
    text = f"{action.name} - {describe_action(action)}".replace("\n", " ")
    if debug_enabled():
        text += f" [priority {action_priority(action)}]"
    return text


def render_battle_panel(player: Character, enemy: Character) -> None:
    render_heading("Battle")
    print(f"  You:   {format_character_line(player)}")
    print(f"  Enemy: {format_character_line(enemy)}")
    if debug_enabled():
        print(f"  [debug] player stats {player.attributes.stats}")
        print(f"  [debug] enemy stats  {enemy.attributes.stats}")


def render_status(character: Character) -> None:
    attributes = character.attributes
    render_heading(f"{character.name} ({character.species.name})")
    print(f"Level {attributes.level}  EXP {attributes.experience}/{EXPERIENCE_TO_LEVEL}")
    print(f"Alignment: {character.species.alignment.title()}")
    print(f"Stats: {attributes.stats}")


def render_log_lines(lines: Iterable[str], *, step: bool = False) -> None:
    """Print narrative log lines, optionally pausing after each one."""
    for line in lines:
        print(f"- {line}")
        if step:
            input("")
