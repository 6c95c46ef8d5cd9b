"""Factory for rolling monsters from the roster."""
from __future__ import annotations

from cvm.core.rng import RNG
from cvm.data.repositories import MonstersRepository
from cvm.domain.entities import Monster, MonsterStatus

MONSTER_HP_RANGE = (50, 100)
RESPAWN_HP_RANGE = (100, 150)
MONSTER_ATTACK_RANGE = (5, 15)
MONSTER_INDEX_RANGE = (0, 100)
IMAGE_URL_TEMPLATE = "https://source.unsplash.com/random/200x200/?monster,{monster_type}"


def roll_monster(monsters_repo: MonstersRepository, rng: RNG) -> Monster:
    """Roll a fresh monster of a random type from the roster."""
    monster_def = rng.choice(monsters_repo.all())
    hp = rng.randrange(*MONSTER_HP_RANGE)
    attack = rng.randrange(*MONSTER_ATTACK_RANGE)
    index = rng.randrange(*MONSTER_INDEX_RANGE)
    return Monster(
        name=f"{monster_def.name} {index}",
        hp=hp,
        max_hp=hp,
        attack=attack,
        description=monster_def.description,
        image_url=IMAGE_URL_TEMPLATE.format(monster_type=monster_def.name.lower()),
        status=MonsterStatus(),
    )


def respawn_monster(previous: Monster, rng: RNG) -> Monster:
    """Roll a tougher monster of the same type as ``previous``, at full health."""
    monster_type = previous.name.split(" ")[0]
    hp = rng.randrange(*RESPAWN_HP_RANGE)
    index = rng.randrange(*MONSTER_INDEX_RANGE)
    return Monster(
        name=f"{monster_type} {index}",
        hp=hp,
        max_hp=hp,
        attack=previous.attack,
        description=previous.description,
        image_url=previous.image_url,
        status=MonsterStatus(),
    )
