"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_TEXT_MODE = "instant"
_DEFAULT_STEP_DELAY_MS = 500
_MAX_STEP_DELAY_MS = 2000


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "CapybaraVsMonsters"
        return Path.home() / "CapybaraVsMonsters"
    return Path.home() / ".config" / "capybara_vs_monsters"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, object]:
    return {"text_display_mode": _DEFAULT_TEXT_MODE, "step_delay_ms": _DEFAULT_STEP_DELAY_MS}


def _normalize_text_mode(value: object) -> str:
    return "step" if value == "step" else _DEFAULT_TEXT_MODE


def _normalize_step_delay(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        return _DEFAULT_STEP_DELAY_MS
    return max(0, min(_MAX_STEP_DELAY_MS, value))


def _normalize(raw: Dict[str, object]) -> Dict[str, object]:
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "step_delay_ms": _normalize_step_delay(raw.get("step_delay_ms", _DEFAULT_STEP_DELAY_MS)),
    }


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk; a missing or unreadable file yields the defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, json.JSONDecodeError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, object], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(_normalize(config), indent=2, sort_keys=True), encoding="utf-8")
