"""Reading definition files from disk."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import DataLoadError, DataValidationError

logger = logging.getLogger(__name__)


def load_json(path: Path) -> object:
    """Parse one definition file, wrapping IO and decode failures in DataLoadError."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}", path) from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file {path}: {exc}", path) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"{path} is not valid JSON (line {exc.lineno}): {exc.msg}", path) from exc
    logger.debug("Loaded definitions from %s", path)
    return data


def load_json_object(path: Path) -> dict[str, object]:
    """Like load_json, but the file must hold a single top-level object."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise DataValidationError(f"{path} must contain a JSON object at the top level.")
    return data
