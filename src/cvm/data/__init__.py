"""Data layer utilities for loading JSON definitions."""

from .errors import DataError, DataLoadError, DataReferenceError, DataValidationError
from .paths import get_definitions_path, get_package_definitions_path

__all__ = [
    "DataError",
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "get_definitions_path",
    "get_package_definitions_path",
]
