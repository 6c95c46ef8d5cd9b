"""Monster status helpers.

Every helper returns a new ``MonsterStatus``; nothing here mutates its input.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from cvm.domain.entities import MonsterStatus

DEFAULT_DOT_TURNS = 3


@dataclass(frozen=True, slots=True)
class DotTick:
    """Outcome of a single damage-over-time tick."""

    status: MonsterStatus
    damage: int
    expired: bool


def apply_dot(status: MonsterStatus, *, damage: int, turns: int | None) -> MonsterStatus:
    """Replace any running damage-over-time with a fresh one."""
    dot_turns = turns or DEFAULT_DOT_TURNS
    if damage <= 0 or dot_turns <= 0:
        return replace(status, dot_damage=0, dot_turns=0)
    return replace(status, dot_damage=damage, dot_turns=dot_turns)


def apply_stun(status: MonsterStatus) -> MonsterStatus:
    return replace(status, stunned=True)


def clear_stun(status: MonsterStatus) -> MonsterStatus:
    return replace(status, stunned=False)


def apply_debuff(status: MonsterStatus, *, percent: int) -> MonsterStatus:
    return replace(status, debuff=max(0, percent))


def tick_dot(status: MonsterStatus) -> DotTick:
    """Consume one turn of damage-over-time.

    When the remaining turns reach zero both the damage and the counter are
    cleared, so an expired effect never leaves residual damage behind.
    """
    if not status.has_dot:
        return DotTick(status=replace(status, dot_damage=0, dot_turns=0), damage=0, expired=False)
    remaining = status.dot_turns - 1
    if remaining <= 0:
        return DotTick(status=replace(status, dot_damage=0, dot_turns=0), damage=status.dot_damage, expired=True)
    return DotTick(status=replace(status, dot_turns=remaining), damage=status.dot_damage, expired=False)
