"""Runtime entity exports."""

from .ability import Ability, AbilityEffect
from .character import Character
from .monster import Monster, MonsterStatus

__all__ = [
    "Ability",
    "AbilityEffect",
    "Character",
    "Monster",
    "MonsterStatus",
]
