"""Monster runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MonsterStatus:
    """Pending status effects on a monster.

    ``dot_damage`` and ``dot_turns`` are both zero when no damage-over-time is active.
    ``debuff`` is a percentage shown to the player; no rule consumes it.
    """

    stunned: bool = False
    dot_damage: int = 0
    dot_turns: int = 0
    debuff: int = 0

    @property
    def has_dot(self) -> bool:
        return self.dot_damage > 0 and self.dot_turns > 0


@dataclass(frozen=True, slots=True)
class Monster:
    """Represents a spawned monster ready for battle."""

    name: str
    hp: int
    max_hp: int
    attack: int
    description: str
    image_url: str
    status: MonsterStatus = field(default_factory=MonsterStatus)

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def hp_ratio(self) -> float:
        if self.max_hp <= 0:
            return 0.0
        return self.hp / self.max_hp
