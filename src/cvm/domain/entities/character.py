"""Player character model."""
from __future__ import annotations

from dataclasses import dataclass

from .ability import Ability


@dataclass(frozen=True, slots=True)
class Character:
    """Represents a player-created hero. Immutable once the battle starts."""

    name: str
    race: str
    class_name: str
    element: str
    description: str
    avatar_url: str
    abilities: tuple[Ability, ...] = ()
