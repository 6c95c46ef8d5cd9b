"""Service layer exports."""

from .errors import FactoryError
from .ability_generator import AbilityGenerator
from .battle_service import BattleService, BattleView
from .controllers import BattleEngine

__all__ = [
    "AbilityGenerator",
    "BattleEngine",
    "BattleService",
    "BattleView",
    "FactoryError",
]
