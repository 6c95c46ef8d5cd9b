"""Integrity checks for the shipped JSON definitions."""
from __future__ import annotations

from cvm.data.repositories import (
    AvatarsRepository,
    ClassesRepository,
    ElementsRepository,
    MonstersRepository,
    NamePoolsRepository,
)
from cvm.data.repositories.name_pools_repo import REQUIRED_POOLS


def test_every_class_has_attack_defense_support_templates() -> None:
    classes = ClassesRepository().all()

    assert {class_def.id for class_def in classes} >= {"warrior", "mage", "healer", "rogue", "archer"}
    for class_def in classes:
        assert [ability.kind for ability in class_def.abilities] == ["attack", "defense", "support"], class_def.id


def test_class_names_and_aliases_are_unique() -> None:
    seen: set[str] = set()
    for class_def in ClassesRepository().all():
        for lookup_name in (class_def.id, *class_def.aliases):
            assert lookup_name not in seen, lookup_name
            seen.add(lookup_name)


def test_every_element_has_two_abilities_and_ultimate_names() -> None:
    elements = ElementsRepository().all()

    assert len(elements) >= 5
    for element_def in elements:
        assert len(element_def.abilities) == 2, element_def.id
        assert element_def.ultimate_names, element_def.id


def test_monster_roster_has_ten_single_word_types() -> None:
    monsters = MonstersRepository().all()

    assert len(monsters) == 10
    assert all(" " not in monster.name for monster in monsters)


def test_avatars_and_name_pools_are_populated() -> None:
    avatars = AvatarsRepository().all()
    pools = NamePoolsRepository()

    assert len(avatars) == 3
    assert len({avatar.url for avatar in avatars}) == 3
    for pool_id in REQUIRED_POOLS:
        assert pools.get(pool_id).words
