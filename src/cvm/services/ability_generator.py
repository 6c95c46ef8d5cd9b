"""Procedural ability generation from free-text class and element names."""
from __future__ import annotations

import logging
from typing import List, Tuple

from cvm.core.rng import RNG
from cvm.core.types import AbilityKind
from cvm.data.repositories import ClassesRepository, ElementsRepository, NamePoolsRepository
from cvm.domain.defs import AbilityTemplateDef, UltimateStyle
from cvm.domain.entities import Ability, AbilityEffect, Character

logger = logging.getLogger(__name__)

ABILITY_SET_SIZE = 5
HYBRID_KINDS: Tuple[AbilityKind, ...] = ("attack", "defense", "support")
HYBRID_KIND_WEIGHTS: Tuple[float, ...] = (0.5, 0.25, 0.25)
ULTIMATE_DAMAGE_RANGE = (50, 80)
ULTIMATE_SUPPORT_VALUE = 30
ULTIMATE_COOLDOWN = 2


class AbilityGenerator:
    """Builds ability sets for new characters and their one-off ultimates.

    Generation never fails: classes and elements missing from the lookup
    tables get synthesized abilities that embed the text the player typed.
    """

    def __init__(
        self,
        classes_repo: ClassesRepository,
        elements_repo: ElementsRepository,
        name_pools_repo: NamePoolsRepository,
    ) -> None:
        self._classes_repo = classes_repo
        self._elements_repo = elements_repo
        self._name_pools_repo = name_pools_repo

    def generate(self, class_name: str, element: str, rng: RNG) -> Tuple[Ability, ...]:
        """Return the ability set for a class/element pairing."""
        normalized_element = element.strip().lower()
        pool: List[AbilityTemplateDef] = []
        pool.extend(self._class_templates(class_name))
        pool.extend(self._element_templates(element))
        pool.append(self._hybrid_template(class_name, element, rng))

        rng.shuffle(pool)
        abilities = tuple(self._to_ability(template, normalized_element) for template in pool[:ABILITY_SET_SIZE])
        logger.debug(
            "Generated abilities for class=%r element=%r: %s",
            class_name,
            element,
            [ability.name for ability in abilities],
        )
        return abilities

    def generate_ultimate(self, character: Character, rng: RNG) -> Ability:
        """Return a fresh ultimate ability for the character."""
        element_def = self._elements_repo.find(character.element)
        if element_def is not None:
            names = element_def.ultimate_names
        else:
            names = self._name_pools_repo.get("fallback_ultimates").words
        name = rng.choice(names)

        class_def = self._classes_repo.find(character.class_name)
        style: UltimateStyle = class_def.ultimate_style if class_def is not None else "damage"
        element_label = element_def.name if element_def is not None else character.element.strip()
        if style == "heal":
            effect = AbilityEffect(kind="heal", value=ULTIMATE_SUPPORT_VALUE)
            description = f"Releases the full restorative power of {element_label}, mending every wound."
        elif style == "aoe":
            effect = AbilityEffect(kind="aoe", value=ULTIMATE_SUPPORT_VALUE)
            description = f"A devastating wave of {element_label} that engulfs the whole battlefield."
        else:
            effect = AbilityEffect(kind="damage", value=rng.randrange(*ULTIMATE_DAMAGE_RANGE))
            description = (
                f"Every lesson of the {character.class_name.strip()} path poured into one final "
                f"strike of {element_label}."
            )

        ultimate = Ability(
            name=_capitalize(name),
            description=description,
            kind="ultimate",
            element=character.element.strip().lower(),
            effect=effect,
            cooldown=ULTIMATE_COOLDOWN,
        )
        logger.debug("Generated ultimate %r (%s %d) for %s", ultimate.name, effect.kind, effect.value, character.name)
        return ultimate

    def _class_templates(self, class_name: str) -> List[AbilityTemplateDef]:
        class_def = self._classes_repo.find(class_name)
        if class_def is not None:
            return list(class_def.abilities[:3])
        label = class_name.strip()
        return [
            AbilityTemplateDef(
                name=f"{label} Strike",
                description=f"The signature strike every {label} learns first.",
                kind="attack",
            ),
            AbilityTemplateDef(
                name=f"{label} Guard",
                description=f"A defensive stance only a seasoned {label} can hold.",
                kind="defense",
            ),
            AbilityTemplateDef(
                name=f"{label} Focus",
                description=f"The {label} gathers strength and steadies the mind.",
                kind="support",
            ),
        ]

    def _element_templates(self, element: str) -> List[AbilityTemplateDef]:
        element_def = self._elements_repo.find(element)
        if element_def is not None:
            return list(element_def.abilities[:2])
        label = element.strip()
        return [
            AbilityTemplateDef(
                name=f"{label} Burst",
                description=f"Unleashes a burst of raw {label} energy.",
                kind="attack",
            ),
            AbilityTemplateDef(
                name=f"{label} Barrier",
                description=f"Raises a barrier woven from {label}.",
                kind="defense",
            ),
        ]

    def _hybrid_template(self, class_name: str, element: str, rng: RNG) -> AbilityTemplateDef:
        adjective = rng.choice(self._name_pools_repo.get("adjectives").words)
        noun = rng.choice(self._name_pools_repo.get("nouns").words)
        element_def = self._elements_repo.find(element)
        element_label = element_def.name if element_def is not None else element.strip()
        kind = rng.weighted_choice(HYBRID_KINDS, HYBRID_KIND_WEIGHTS)
        return AbilityTemplateDef(
            name=f"{adjective} {noun} of {element_label}",
            description=f"A technique born where the {class_name.strip()} path meets the power of {element.strip()}.",
            kind=kind,
        )

    @staticmethod
    def _to_ability(template: AbilityTemplateDef, element: str) -> Ability:
        return Ability(
            name=_capitalize(template.name),
            description=template.description,
            kind=template.kind,
            element=element,
            effect=template.effect,
        )


def _capitalize(name: str) -> str:
    if not name:
        return name
    return name[0].upper() + name[1:]
