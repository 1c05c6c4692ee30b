from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from skirmish.presentation.cli import app


def _feed(monkeypatch, answers: list[str]) -> None:
    replies: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(replies))


def test_new_game_then_quit(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    # new game, seed 5, first species, quit from camp
    _feed(monkeypatch, ["1", "5", "1", "4"])

    app.main()

    out = capsys.readouterr().out
    assert "Game started with seed: 5" in out
    assert "Goodbye!" in out


def test_battle_then_run_away(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    # new game, battle, pick "Run away" (after four known actions), quit
    _feed(monkeypatch, ["1", "9", "2", "1", "5", "4"])

    app.main()

    out = capsys.readouterr().out
    assert "appeared!" in out
    assert "ran away!" in out


def test_save_then_load(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    # new game, save to slot 1, quit; then load slot 1 and quit
    _feed(monkeypatch, ["1", "3", "1", "3", "1", "4"])
    app.main()
    _feed(monkeypatch, ["2", "1", "4"])
    app.main()

    out = capsys.readouterr().out
    assert "Saved to slot 1." in out
    assert "Loaded " in out


def test_new_game_without_species_returns_to_menu(monkeypatch, tmp_path: Path, capsys) -> None:
    definitions = tmp_path / "definitions"
    definitions.mkdir()
    (definitions / "species.json").write_text(json.dumps({}), encoding="utf-8")
    (definitions / "actions.json").write_text(json.dumps({}), encoding="utf-8")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("SKIRMISH_DATA_DIR", str(definitions))
    # new game is refused, then quit from the main menu
    _feed(monkeypatch, ["1", "3"])

    app.main()

    out = capsys.readouterr().out
    assert "No species are defined." in out
    assert "Goodbye!" in out
