"""Factory helpers for runtime entities."""

from .character_factory import create_character, is_capybara
from .monster_factory import respawn_monster, roll_monster

__all__ = [
    "create_character",
    "is_capybara",
    "respawn_monster",
    "roll_monster",
]
