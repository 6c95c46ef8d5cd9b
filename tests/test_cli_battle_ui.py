from __future__ import annotations

from typing import Callable, Iterator

import pytest

from cvm.core.rng import RNG
from cvm.domain.entities import Character
from cvm.presentation.cli import app
from cvm.presentation.cli.config import default_config
from cvm.services.factories import create_character


def _make_character(services: app._Services, rng: RNG) -> Character:
    return create_character(
        "Barsik",
        "Otter",
        "Warrior",
        "Fire",
        "",
        "",
        generator=services.generator,
        avatars_repo=services.avatars_repo,
        rng=rng,
    )


def _scripted_input(action_answer: str, menu_answers: Iterator[str]) -> Callable[[str], str]:
    def fake_input(prompt: str = "") -> str:
        if prompt.startswith("Select an option"):
            return next(menu_answers)
        return action_answer

    return fake_input


def test_battle_loop_fights_until_victory_then_quits(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    services = app._build_services()
    rng = RNG(21)
    character = _make_character(services, rng)
    monkeypatch.setattr("builtins.input", _scripted_input("1", iter(["4"])))

    result = app._run_battle_loop(services, character, rng)

    output = capsys.readouterr().out
    assert result == "quit"
    assert "The battle begins!" in output
    assert "Barsik defeats" in output
    assert "DEFEATED" in output


def test_battle_loop_can_fight_a_new_monster(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    services = app._build_services()
    rng = RNG(5)
    character = _make_character(services, rng)
    monkeypatch.setattr("builtins.input", _scripted_input("1", iter(["1", "3"])))

    result = app._run_battle_loop(services, character, rng)

    output = capsys.readouterr().out
    assert result == "main_menu"
    assert "A new enemy appears" in output
    assert output.count("Barsik defeats") == 2


def test_retreat_returns_to_character_creation(monkeypatch: pytest.MonkeyPatch) -> None:
    services = app._build_services()
    rng = RNG(3)
    character = _make_character(services, rng)
    retreat_choice = str(len(character.abilities) + 1)
    monkeypatch.setattr("builtins.input", _scripted_input(retreat_choice, iter([])))

    assert app._run_battle_loop(services, character, rng) == "new_character"


def test_main_menu_quit(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.setattr(app, "load_config", default_config)
    monkeypatch.setattr("builtins.input", lambda prompt="": "3")

    app.main()

    output = capsys.readouterr().out
    assert "=== Capybara vs Monsters ===" in output
    assert "Goodbye!" in output


def test_character_creation_reprompts_until_valid(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    services = app._build_services()
    answers = iter(
        [
            "", "Otter", "Rogue", "Shadow", "",
            "Barsik", "Capybara", "Rogue", "Shadow", "", "1",
        ]
    )
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    character = app._create_character_loop(services, RNG(4))

    output = capsys.readouterr().out
    assert "Cannot create character" in output
    assert character.name == "Barsik"
    assert character.avatar_url == services.avatars_repo.all()[0].url
    assert len(character.abilities) == 5
