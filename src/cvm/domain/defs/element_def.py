"""Element archetype definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .ability_def import AbilityTemplateDef


@dataclass(frozen=True, slots=True)
class ElementDef:
    """Describes a recognized element, its abilities and ultimate names."""

    id: str
    name: str
    abilities: Tuple[AbilityTemplateDef, ...]
    ultimate_names: Tuple[str, ...]
