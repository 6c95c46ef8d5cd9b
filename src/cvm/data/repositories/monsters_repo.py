"""Monster roster repository."""
from __future__ import annotations

from typing import Dict

from cvm.data.errors import DataValidationError
from cvm.data.repositories.base import RepositoryBase
from cvm.domain.defs import MonsterDef


class MonstersRepository(RepositoryBase[MonsterDef]):
    """Loads the monster types that can be rolled for a battle."""

    def __init__(self, base_path=None) -> None:
        super().__init__("monsters.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MonsterDef]:
        if not raw:
            raise DataValidationError("monster roster must not be empty.")
        monsters: Dict[str, MonsterDef] = {}
        for raw_id, payload in raw.items():
            monster_data = self._require_mapping(payload, f"monster '{raw_id}'")
            self._assert_fields(monster_data, {"name", "description"}, f"monster '{raw_id}'")
            name = self._require_str(monster_data["name"], f"monster '{raw_id}' name")
            if " " in name.strip():
                raise DataValidationError(f"monster '{raw_id}' name must be a single word.")
            monsters[raw_id] = MonsterDef(
                id=raw_id,
                name=name,
                description=self._require_str(monster_data["description"], f"monster '{raw_id}' description"),
            )
        return monsters
