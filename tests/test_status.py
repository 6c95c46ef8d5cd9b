from __future__ import annotations

from cvm.domain.entities import MonsterStatus
from cvm.domain.status import (
    DEFAULT_DOT_TURNS,
    apply_debuff,
    apply_dot,
    apply_stun,
    clear_stun,
    tick_dot,
)


def test_apply_dot_defaults_duration_and_does_not_mutate_input() -> None:
    status = MonsterStatus()
    updated = apply_dot(status, damage=10, turns=None)

    assert updated.dot_damage == 10
    assert updated.dot_turns == DEFAULT_DOT_TURNS
    assert status.dot_damage == 0
    assert status.dot_turns == 0


def test_apply_dot_replaces_running_dot() -> None:
    status = apply_dot(MonsterStatus(), damage=4, turns=1)
    updated = apply_dot(status, damage=8, turns=2)

    assert (updated.dot_damage, updated.dot_turns) == (8, 2)


def test_tick_dot_counts_down_and_clears_on_expiry() -> None:
    status = apply_dot(MonsterStatus(), damage=10, turns=2)

    first = tick_dot(status)
    assert first.damage == 10
    assert first.expired is False
    assert (first.status.dot_damage, first.status.dot_turns) == (10, 1)

    second = tick_dot(first.status)
    assert second.damage == 10
    assert second.expired is True
    assert (second.status.dot_damage, second.status.dot_turns) == (0, 0)

    third = tick_dot(second.status)
    assert third.damage == 0
    assert third.expired is False


def test_stun_and_debuff_helpers() -> None:
    stunned = apply_stun(MonsterStatus())
    assert stunned.stunned is True
    assert clear_stun(stunned).stunned is False

    weakened = apply_debuff(MonsterStatus(), percent=20)
    assert weakened.debuff == 20
    assert apply_debuff(weakened, percent=-5).debuff == 0
