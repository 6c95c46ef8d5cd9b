"""Monster roster definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MonsterDef:
    """Minimal monster type definition."""

    id: str
    name: str
    description: str
