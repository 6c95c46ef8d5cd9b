"""Element archetype repository."""
from __future__ import annotations

from typing import Dict

from cvm.data.errors import DataValidationError
from cvm.data.repositories.base import RepositoryBase
from cvm.domain.defs import ElementDef

ELEMENT_ABILITY_COUNT = 2


class ElementsRepository(RepositoryBase[ElementDef]):
    """Loads element archetypes with their abilities and ultimate names."""

    def __init__(self, base_path=None) -> None:
        super().__init__("elements.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ElementDef]:
        elements: Dict[str, ElementDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or raw_id != raw_id.lower():
                raise DataValidationError(f"Element ID '{raw_id}' must be a lowercase string.")
            element_data = self._require_mapping(payload, f"element '{raw_id}'")
            self._assert_fields(element_data, {"name", "abilities", "ultimate_names"}, f"element '{raw_id}'")
            ultimate_names = self._require_str_list(element_data["ultimate_names"], f"element '{raw_id}' ultimate_names")
            if not ultimate_names:
                raise DataValidationError(f"element '{raw_id}' ultimate_names must not be empty.")
            elements[raw_id] = ElementDef(
                id=raw_id,
                name=self._require_str(element_data["name"], f"element '{raw_id}' name"),
                abilities=tuple(
                    self._require_ability_list(
                        element_data["abilities"], f"element '{raw_id}' abilities", count=ELEMENT_ABILITY_COUNT
                    )
                ),
                ultimate_names=tuple(ultimate_names),
            )
        return elements

    def find(self, element: str) -> ElementDef | None:
        """Return the archetype for a free-text element, if recognized."""
        self._ensure_loaded()
        assert self._definitions is not None
        return self._definitions.get(element.strip().lower())
