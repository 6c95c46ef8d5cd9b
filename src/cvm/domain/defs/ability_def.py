"""Ability template definitions loaded from the class and element tables."""
from __future__ import annotations

from dataclasses import dataclass

from cvm.core.types import AbilityKind
from cvm.domain.entities import AbilityEffect


@dataclass(frozen=True, slots=True)
class AbilityTemplateDef:
    """Archetype ability before it is tagged with a character's element."""

    name: str
    description: str
    kind: AbilityKind
    effect: AbilityEffect | None = None
