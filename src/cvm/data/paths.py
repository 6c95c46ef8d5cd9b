"""Locating the JSON definition files."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_DIR_ENV = "CVM_DEFINITIONS_DIR"


def get_package_definitions_path() -> Path:
    """Return the definitions directory shipped inside the cvm package."""
    return Path(__file__).resolve().parent / "definitions"


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the definitions directory.

    An explicit ``base_path`` wins, then the CVM_DEFINITIONS_DIR environment
    variable, then the JSON files bundled with the package.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.getenv(DEFINITIONS_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return get_package_definitions_path()
