"""Avatar catalogue definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AvatarDef:
    """A selectable avatar picture."""

    id: str
    url: str
    description: str
