"""Word pool definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class NamePoolDef:
    """A named list of words used to build generated ability names."""

    id: str
    words: Tuple[str, ...]
