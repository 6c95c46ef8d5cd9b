"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import textwrap
import time
from typing import Iterable, Sequence

from cvm.core.types import TextDisplayMode
from cvm.domain.battle_models import BattleLogEntry
from cvm.domain.entities import Ability

_text_display_mode: TextDisplayMode = "instant"
_step_delay_seconds = 0.5


def debug_enabled() -> bool:
    """Return True only when CVM_DEBUG is explicitly set to '1'."""
    return os.getenv("CVM_DEBUG") == "1"


def set_text_display_mode(mode: str, *, step_delay_ms: int | None = None) -> None:
    """Choose between instant output and staggered log output."""
    global _text_display_mode, _step_delay_seconds
    _text_display_mode = "step" if mode == "step" else "instant"
    if step_delay_ms is not None:
        _step_delay_seconds = max(0, step_delay_ms) / 1000


def get_text_display_mode() -> TextDisplayMode:
    return _text_display_mode


def wrap_text(text: str, width: int, *, indent_continuation: bool = True) -> list[str]:
    """
    Wrap text to a fixed width, breaking on word boundaries.

    Continuation lines are indented by two spaces unless indent_continuation is False.
    """
    if not text or width <= 0:
        return [text] if text else [""]
    subsequent_indent = "  " if indent_continuation else ""
    wrapped = textwrap.fill(
        text,
        width=width,
        subsequent_indent=subsequent_indent,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return wrapped.split("\n")


def format_hp_bar(hp: int, max_hp: int, *, width: int = 20) -> str:
    """Return a text progress bar such as ``[#####-----] 50/100``."""
    if max_hp <= 0:
        filled = 0
    else:
        filled = round(width * max(0, min(hp, max_hp)) / max_hp)
    return f"[{'#' * filled}{'-' * (width - filled)}] {hp}/{max_hp}"


def format_log_entry(entry: BattleLogEntry) -> str:
    if entry.is_special:
        marker = "*"
    elif entry.is_player_action:
        marker = ">"
    else:
        marker = "-"
    return f"{marker} {entry.text}"


def format_ability(ability: Ability) -> str:
    tags = [ability.kind]
    if ability.effect is not None:
        effect = ability.effect
        detail = f"{effect.kind} {effect.value}"
        if effect.duration:
            detail += f" for {effect.duration}t"
        tags.append(detail)
    return f"{ability.name} ({', '.join(tags)}) - {ability.description}"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def render_log_entries(entries: Sequence[BattleLogEntry], *, width: int = 72) -> None:
    """Print log entries, pausing between them in step mode.

    The pause is cosmetic pacing; the entries are already final when this runs.
    """
    for idx, entry in enumerate(entries):
        if idx > 0 and _text_display_mode == "step" and _step_delay_seconds > 0:
            time.sleep(_step_delay_seconds)
        for line in wrap_text(format_log_entry(entry), width):
            print(line)
