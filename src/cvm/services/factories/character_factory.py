"""Factory for creating player characters from creation-form input."""
from __future__ import annotations

from cvm.core.rng import RNG
from cvm.data.repositories import AvatarsRepository
from cvm.domain.entities import Character
from cvm.services.ability_generator import AbilityGenerator
from cvm.services.errors import FactoryError

CAPYBARA_RACES = {"capybara", "капибара"}
DEFAULT_DESCRIPTION = "An invincible hero!"
RACE_AVATAR_TEMPLATE = "https://source.unsplash.com/random/200x200/?{race}"


def is_capybara(race: str) -> bool:
    return race.strip().lower() in CAPYBARA_RACES


def create_character(
    name: str,
    race: str,
    class_name: str,
    element: str,
    description: str,
    avatar_url: str,
    *,
    generator: AbilityGenerator,
    avatars_repo: AvatarsRepository,
    rng: RNG,
) -> Character:
    """Validate creation input and build a character with a generated ability set."""
    for label, value in (("name", name), ("race", race), ("class", class_name), ("element", element)):
        if not value.strip():
            raise FactoryError(f"Character {label} is required.")

    if is_capybara(race):
        if not avatar_url:
            raise FactoryError("Choose an avatar for your capybara.")
        if avatars_repo.find_by_url(avatar_url) is None:
            raise FactoryError(f"Unknown capybara avatar '{avatar_url}'.")
    else:
        avatar_url = RACE_AVATAR_TEMPLATE.format(race=race.strip().lower())

    abilities = generator.generate(class_name, element, rng)
    return Character(
        name=name.strip(),
        race=race.strip(),
        class_name=class_name.strip(),
        element=element.strip(),
        description=description.strip() or DEFAULT_DESCRIPTION,
        avatar_url=avatar_url,
        abilities=abilities,
    )
