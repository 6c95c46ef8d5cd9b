"""Exceptions raised while loading the JSON definition files."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base class for definition data problems."""


class DataLoadError(DataError):
    """A definition file is missing, unreadable or not JSON."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DataValidationError(DataError):
    """Definition content has the wrong shape or out-of-range values."""


class DataReferenceError(DataError):
    """Definitions clash with each other, such as two classes claiming one alias."""
