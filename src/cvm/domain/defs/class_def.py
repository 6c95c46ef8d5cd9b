"""Class archetype definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from .ability_def import AbilityTemplateDef

UltimateStyle = Literal["damage", "heal", "aoe"]


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Describes a recognized character class and its signature abilities."""

    id: str
    name: str
    aliases: Tuple[str, ...]
    ultimate_style: UltimateStyle
    abilities: Tuple[AbilityTemplateDef, ...]

    def matches(self, normalized_class: str) -> bool:
        return normalized_class == self.id or normalized_class in self.aliases
