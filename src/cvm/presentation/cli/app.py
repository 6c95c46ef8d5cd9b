"""Console-driven UI loops for Capybara vs Monsters."""
from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Literal

from cvm.core.rng import RNG
from cvm.data.repositories import (
    AvatarsRepository,
    ClassesRepository,
    ElementsRepository,
    MonstersRepository,
    NamePoolsRepository,
)
from cvm.domain.entities import Character
from cvm.services import AbilityGenerator, BattleEngine, BattleService, BattleView, FactoryError
from cvm.services.factories import create_character, is_capybara, roll_monster

from .config import load_config, save_config
from .render import (
    debug_enabled,
    format_ability,
    format_hp_bar,
    get_text_display_mode,
    render_bullet_lines,
    render_heading,
    render_log_entries,
    render_menu,
    set_text_display_mode,
)

MenuAction = Literal["new_game", "options", "quit"]
BattleExit = Literal["new_character", "main_menu", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1


@dataclass(slots=True)
class _Services:
    generator: AbilityGenerator
    battle_service: BattleService
    monsters_repo: MonstersRepository
    avatars_repo: AvatarsRepository


def main() -> None:
    """Start the interactive CLI session."""
    config = load_config()
    set_text_display_mode(str(config["text_display_mode"]), step_delay_ms=int(config["step_delay_ms"]))
    services = _build_services()
    print("=== Capybara vs Monsters ===")
    print("Create your character and fight monsters!")
    running = True
    while running:
        action = _main_menu_loop()
        if action == "quit":
            running = False
            continue
        if action == "options":
            _options_menu(config)
            continue
        rng = RNG(_prompt_seed())
        exit_action: BattleExit = "new_character"
        while exit_action == "new_character":
            character = _create_character_loop(services, rng)
            exit_action = _run_battle_loop(services, character, rng)
        if exit_action == "quit":
            running = False
    print("Goodbye!")


def _build_services() -> _Services:
    """Construct the services with concrete repositories."""
    generator = AbilityGenerator(
        classes_repo=ClassesRepository(),
        elements_repo=ElementsRepository(),
        name_pools_repo=NamePoolsRepository(),
    )
    return _Services(
        generator=generator,
        battle_service=BattleService(generator),
        monsters_repo=MonstersRepository(),
        avatars_repo=AvatarsRepository(),
    )


def _main_menu_loop() -> MenuAction:
    while True:
        render_menu("Main Menu", ["New Game", "Options", "Quit"])
        choice = input("Select an option: ").strip()
        if choice == "1":
            return "new_game"
        if choice == "2":
            return "options"
        if choice == "3":
            return "quit"
        print("Invalid selection. Please enter 1, 2 or 3.")


def _options_menu(config: dict) -> None:
    current = get_text_display_mode()
    render_menu("Options", [f"Text display: {current} (toggle)", "Back"])
    choice = input("Select an option: ").strip()
    if choice != "1":
        return
    config["text_display_mode"] = "instant" if current == "step" else "step"
    set_text_display_mode(str(config["text_display_mode"]), step_delay_ms=int(config["step_delay_ms"]))
    try:
        save_config(config)
    except OSError as exc:
        print(f"Could not save options: {exc}")
        return
    print(f"Text display set to {config['text_display_mode']}.")


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_text(label: str) -> str:
    return input(f"{label}: ").strip()


def _create_character_loop(services: _Services, rng: RNG) -> Character:
    render_heading("Character Creation")
    while True:
        name = _prompt_text("Character name")
        race = _prompt_text("Race (for example, capybara)")
        class_name = _prompt_text("Class")
        element = _prompt_text("Element")
        description = _prompt_text("Description (optional)")
        avatar_url = _prompt_avatar(services.avatars_repo) if is_capybara(race) else ""
        try:
            character = create_character(
                name,
                race,
                class_name,
                element,
                description,
                avatar_url,
                generator=services.generator,
                avatars_repo=services.avatars_repo,
                rng=rng,
            )
        except FactoryError as exc:
            print(f"Cannot create character: {exc}")
            continue
        _render_character(character)
        return character


def _prompt_avatar(avatars_repo: AvatarsRepository) -> str:
    avatars = avatars_repo.all()
    render_menu("Choose an avatar for your capybara", [avatar.description for avatar in avatars])
    raw = input("Avatar #: ").strip()
    try:
        index = int(raw) - 1
    except ValueError:
        return ""
    if 0 <= index < len(avatars):
        return avatars[index].url
    return ""


def _render_character(character: Character) -> None:
    render_heading(character.name)
    print(f"Race: {character.race}  Class: {character.class_name}  Element: {character.element}")
    print(character.description)
    print("Abilities:")
    for ability in character.abilities:
        print(f"  - {format_ability(ability)}")


def _run_battle_loop(services: _Services, character: Character, rng: RNG) -> BattleExit:
    """Fight monsters until the player retreats or quits."""
    monster = roll_monster(services.monsters_repo, rng)
    engine = BattleEngine(services.battle_service, character, monster, rng)
    last_log_id = _render_new_logs(engine, 0)
    while True:
        _render_battle_view(engine.get_battle_view())
        if engine.phase == "defeated":
            render_menu("Victory", ["Fight a new monster", "Create a new character", "Main menu", "Quit"])
            choice = input("Select an option: ").strip()
            if choice == "1":
                engine.reset()
                last_log_id = _render_new_logs(engine, 0)
            elif choice == "2":
                return "new_character"
            elif choice == "3":
                return "main_menu"
            elif choice == "4":
                return "quit"
            continue

        abilities = engine.available_abilities()
        options = [format_ability(ability) for ability in abilities]
        options.append("Retreat and create a new character")
        render_menu("Actions", options)
        raw = input("Choose action: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Invalid selection.")
            continue
        if index == len(abilities):
            return "new_character"
        if 0 <= index < len(abilities):
            engine.select_ability(abilities[index])
        engine.resolve_turn()
        last_log_id = _render_new_logs(engine, last_log_id)


def _render_new_logs(engine: BattleEngine, last_log_id: int) -> int:
    entries = engine.state.logs_after(last_log_id)
    if entries:
        print()
        render_log_entries(entries)
    return engine.state.logs[-1].id if engine.state.logs else last_log_id


def _render_battle_view(view: BattleView) -> None:
    render_heading(f"{view.character_name} vs {view.monster_name} (turn {view.turn_count})")
    print(view.monster_description)
    print(f"HP {_format_monster_hp_display(view, debug_enabled=debug_enabled())}")
    if view.status_tags:
        print("Status:")
        render_bullet_lines(view.status_tags)
    if view.ultimate_name:
        print(f"Ultimate ready: {view.ultimate_name}")


def _format_monster_hp_display(view: BattleView, *, debug_enabled: bool) -> str:
    if view.is_defeated:
        return "DEFEATED"
    bar = format_hp_bar(view.hp, view.max_hp)
    if not debug_enabled:
        return bar
    status = view.raw_status
    return (
        f"{bar} (DEBUG stunned={status.stunned} dot={status.dot_damage}x{status.dot_turns} "
        f"debuff={status.debuff})"
    )
