"""Ability runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from cvm.core.types import AbilityKind, EffectKind


@dataclass(frozen=True, slots=True)
class AbilityEffect:
    """Mechanical payload of an ability."""

    kind: EffectKind
    value: int
    duration: int | None = None


@dataclass(frozen=True, slots=True)
class Ability:
    """A named action a character can pick during a turn.

    Abilities carry no id; two abilities with equal fields are the same ability.
    ``cooldown`` is informational only and never enforced by the battle rules.
    """

    name: str
    description: str
    kind: AbilityKind
    element: str | None = None
    effect: AbilityEffect | None = None
    cooldown: int | None = None

    @property
    def is_ultimate(self) -> bool:
        return self.kind == "ultimate"
