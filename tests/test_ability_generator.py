from __future__ import annotations

from cvm.core.rng import RNG
from cvm.data.repositories import ClassesRepository, ElementsRepository, NamePoolsRepository
from cvm.domain.entities import Character
from cvm.services.ability_generator import (
    ABILITY_SET_SIZE,
    ULTIMATE_COOLDOWN,
    ULTIMATE_SUPPORT_VALUE,
    AbilityGenerator,
)


def _make_generator() -> AbilityGenerator:
    return AbilityGenerator(
        classes_repo=ClassesRepository(),
        elements_repo=ElementsRepository(),
        name_pools_repo=NamePoolsRepository(),
    )


def _character(class_name: str, element: str) -> Character:
    return Character(
        name="Hero",
        race="capybara",
        class_name=class_name,
        element=element,
        description="An invincible hero!",
        avatar_url="",
    )


def test_unknown_class_and_element_still_yield_five_abilities() -> None:
    generator = _make_generator()

    abilities = generator.generate("Wizard123", "Plasma", RNG(1))

    assert len(abilities) == ABILITY_SET_SIZE
    assert all(ability.element == "plasma" for ability in abilities)
    assert all(ability.kind in {"attack", "defense", "support"} for ability in abilities)
    assert all(ability.effect is None for ability in abilities)
    assert all(ability.cooldown is None for ability in abilities)


def test_unknown_names_are_embedded_in_synthesized_abilities() -> None:
    generator = _make_generator()
    synthesized = {"Wizard123 Strike", "Wizard123 Guard", "Wizard123 Focus", "Plasma Burst", "Plasma Barrier"}

    for seed in range(10):
        abilities = generator.generate("Wizard123", "Plasma", RNG(seed))
        for ability in abilities:
            assert ability.name in synthesized or ability.name.endswith(" of Plasma")


def test_lowercase_class_names_are_capitalized() -> None:
    generator = _make_generator()

    abilities = generator.generate("necromancer", "void", RNG(4))

    assert any(ability.name.startswith("Necromancer ") for ability in abilities)
    assert all(ability.name[0].isupper() for ability in abilities)


def test_known_class_and_element_use_table_abilities() -> None:
    generator = _make_generator()
    warrior = ClassesRepository().get("warrior")
    fire = ElementsRepository().get("fire")
    table_names = {template.name for template in (*warrior.abilities, *fire.abilities)}

    abilities = generator.generate("  WARRIOR ", "Fire", RNG(9))

    from_tables = [ability for ability in abilities if ability.name in table_names]
    assert len(abilities) == ABILITY_SET_SIZE
    assert len(from_tables) >= ABILITY_SET_SIZE - 1
    assert all(ability.element == "fire" for ability in abilities)
    fireball = next((ability for ability in abilities if ability.name == "Fireball"), None)
    if fireball is not None:
        assert fireball.effect is not None
        assert (fireball.effect.kind, fireball.effect.value, fireball.effect.duration) == ("dot", 10, 3)


def test_class_aliases_resolve_to_the_archetype() -> None:
    generator = _make_generator()
    mage_names = {template.name for template in ClassesRepository().get("mage").abilities}

    abilities = generator.generate("Wizard", "Plasma", RNG(2))

    assert mage_names & {ability.name for ability in abilities}


def test_generation_is_deterministic_for_a_seed() -> None:
    generator = _make_generator()

    first = generator.generate("Rogue", "Shadow", RNG(77))
    second = generator.generate("Rogue", "Shadow", RNG(77))

    assert first == second


def test_damage_ultimate_for_warrior() -> None:
    generator = _make_generator()
    fire = ElementsRepository().get("fire")

    ultimate = generator.generate_ultimate(_character("Warrior", "Fire"), RNG(5))

    assert ultimate.kind == "ultimate"
    assert ultimate.is_ultimate
    assert ultimate.cooldown == ULTIMATE_COOLDOWN
    assert ultimate.element == "fire"
    assert ultimate.name in fire.ultimate_names
    assert ultimate.effect is not None
    assert ultimate.effect.kind == "damage"
    assert 50 <= ultimate.effect.value < 80


def test_healer_and_mage_ultimate_styles() -> None:
    generator = _make_generator()

    heal = generator.generate_ultimate(_character("Healer", "Light"), RNG(5))
    aoe = generator.generate_ultimate(_character("sorcerer", "Ice"), RNG(5))

    assert heal.effect is not None
    assert (heal.effect.kind, heal.effect.value) == ("heal", ULTIMATE_SUPPORT_VALUE)
    assert aoe.effect is not None
    assert (aoe.effect.kind, aoe.effect.value) == ("aoe", ULTIMATE_SUPPORT_VALUE)


def test_unknown_element_ultimate_uses_fallback_names() -> None:
    generator = _make_generator()
    fallback = set(NamePoolsRepository().get("fallback_ultimates").words)

    ultimate = generator.generate_ultimate(_character("Wizard123", "Plasma"), RNG(3))

    assert ultimate.name in fallback
    assert ultimate.element == "plasma"
    assert ultimate.effect is not None
    assert ultimate.effect.kind == "damage"


def test_every_shipped_pairing_yields_a_full_set() -> None:
    generator = _make_generator()
    rng = RNG(13)

    for class_def in ClassesRepository().all():
        for element_def in ElementsRepository().all():
            abilities = generator.generate(class_def.name, element_def.name, rng)
            assert len(abilities) == ABILITY_SET_SIZE, (class_def.id, element_def.id)
