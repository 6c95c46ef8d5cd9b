"""Shared type aliases for the core and domain layers."""
from typing import Literal

AbilityKind = Literal["attack", "defense", "support", "ultimate"]
EffectKind = Literal["damage", "dot", "stun", "heal", "buff", "debuff", "aoe"]
BattlePhase = Literal["awaiting_selection", "resolving", "defeated"]
TextDisplayMode = Literal["instant", "step"]

ABILITY_KINDS: frozenset[str] = frozenset({"attack", "defense", "support", "ultimate"})
EFFECT_KINDS: frozenset[str] = frozenset({"damage", "dot", "stun", "heal", "buff", "debuff", "aoe"})

__all__ = [
    "ABILITY_KINDS",
    "AbilityKind",
    "BattlePhase",
    "EFFECT_KINDS",
    "EffectKind",
    "TextDisplayMode",
]
