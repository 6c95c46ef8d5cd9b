"""UI-agnostic controllers for game flow orchestration."""
from __future__ import annotations

from .battle_engine import BattleEngine, DeferredPhase

__all__ = [
    "BattleEngine",
    "DeferredPhase",
]
