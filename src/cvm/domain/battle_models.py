"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from cvm.domain.entities import Ability, Monster


@dataclass(frozen=True, slots=True)
class BattleLogEntry:
    """One line of battle narration."""

    id: int
    text: str
    is_player_action: bool = False
    is_special: bool = False


@dataclass(frozen=True, slots=True)
class BattleState:
    """Snapshot of a battle against a single monster.

    Instances are never mutated; each rule returns a new snapshot.
    """

    monster: Monster
    logs: Tuple[BattleLogEntry, ...] = ()
    is_defeated: bool = False
    turn_count: int = 0
    ultimate_available: bool = False
    ultimate_ability: Ability | None = None

    @property
    def next_log_id(self) -> int:
        if not self.logs:
            return 1
        return self.logs[-1].id + 1

    def with_log(self, text: str, *, is_player_action: bool = False, is_special: bool = False) -> "BattleState":
        """Return a copy with a new log entry appended."""
        entry = BattleLogEntry(
            id=self.next_log_id,
            text=text,
            is_player_action=is_player_action,
            is_special=is_special,
        )
        return replace(self, logs=self.logs + (entry,))

    def with_monster(self, monster: Monster) -> "BattleState":
        return replace(self, monster=monster)

    def logs_after(self, log_id: int) -> Tuple[BattleLogEntry, ...]:
        """Return entries newer than ``log_id``, in order."""
        return tuple(entry for entry in self.logs if entry.id > log_id)
