from __future__ import annotations

import pytest

from cvm.domain.entities import MonsterStatus
from cvm.presentation.cli.app import _format_monster_hp_display
from cvm.presentation.cli.render import debug_enabled
from cvm.services import BattleView


def _view(hp: int, *, is_defeated: bool = False, status: MonsterStatus | None = None) -> BattleView:
    return BattleView(
        character_name="Barsik",
        monster_name="Slime 3",
        monster_description="A vicious slime.",
        hp=hp,
        max_hp=40,
        status_tags=[],
        turn_count=2,
        is_defeated=is_defeated,
        ultimate_name=None,
        raw_status=status or MonsterStatus(),
    )


def test_format_monster_hp_display_no_debug() -> None:
    assert _format_monster_hp_display(_view(20), debug_enabled=False) == "[##########----------] 20/40"


def test_format_monster_hp_display_debug_enabled() -> None:
    status = MonsterStatus(stunned=True, dot_damage=8, dot_turns=2, debuff=15)
    assert _format_monster_hp_display(_view(20, status=status), debug_enabled=True) == (
        "[##########----------] 20/40 (DEBUG stunned=True dot=8x2 debuff=15)"
    )


def test_format_monster_hp_display_defeated() -> None:
    assert _format_monster_hp_display(_view(0, is_defeated=True), debug_enabled=True) == "DEFEATED"


@pytest.mark.parametrize("value, expected", [("1", True), ("0", False), ("true", False)])
def test_debug_enabled_requires_exact_flag(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    monkeypatch.setenv("CVM_DEBUG", value)
    assert debug_enabled() is expected


def test_debug_disabled_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CVM_DEBUG", raising=False)
    assert debug_enabled() is False
