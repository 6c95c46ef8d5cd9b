"""Class archetype repository."""
from __future__ import annotations

from typing import Dict

from cvm.data.errors import DataReferenceError, DataValidationError
from cvm.data.repositories.base import RepositoryBase
from cvm.domain.defs import ClassDef

VALID_ULTIMATE_STYLES = {"damage", "heal", "aoe"}
CLASS_ABILITY_COUNT = 3


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads class archetypes and resolves free-text class names against them."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        claimed_names: Dict[str, str] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or raw_id != raw_id.lower():
                raise DataValidationError(f"Class ID '{raw_id}' must be a lowercase string.")
            class_data = self._require_mapping(payload, f"class '{raw_id}'")
            self._assert_fields(
                class_data,
                {"name", "ultimate_style", "abilities"},
                f"class '{raw_id}'",
                optional_fields={"aliases"},
            )
            aliases = tuple(
                alias.lower()
                for alias in self._require_str_list(class_data.get("aliases", []), f"class '{raw_id}' aliases")
            )
            for lookup_name in (raw_id, *aliases):
                owner = claimed_names.get(lookup_name)
                if owner is not None and owner != raw_id:
                    raise DataReferenceError(
                        f"class '{raw_id}' name '{lookup_name}' is already used by class '{owner}'."
                    )
                claimed_names[lookup_name] = raw_id

            classes[raw_id] = ClassDef(
                id=raw_id,
                name=self._require_str(class_data["name"], f"class '{raw_id}' name"),
                aliases=aliases,
                ultimate_style=self._require_literal(  # type: ignore[arg-type]
                    class_data["ultimate_style"], VALID_ULTIMATE_STYLES, f"class '{raw_id}' ultimate_style"
                ),
                abilities=tuple(
                    self._require_ability_list(
                        class_data["abilities"], f"class '{raw_id}' abilities", count=CLASS_ABILITY_COUNT
                    )
                ),
            )
        return classes

    def find(self, class_name: str) -> ClassDef | None:
        """Return the archetype matching a free-text class name, if any."""
        normalized = class_name.strip().lower()
        if not normalized:
            return None
        for class_def in self.all():
            if class_def.matches(normalized):
                return class_def
        return None
