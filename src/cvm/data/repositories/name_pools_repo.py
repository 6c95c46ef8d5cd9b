"""Word pools used by the ability generator."""
from __future__ import annotations

from typing import Dict

from cvm.data.errors import DataValidationError
from cvm.data.repositories.base import RepositoryBase
from cvm.domain.defs import NamePoolDef

REQUIRED_POOLS = {"adjectives", "nouns", "fallback_ultimates"}


class NamePoolsRepository(RepositoryBase[NamePoolDef]):
    """Loads named word pools; the generator needs every pool in REQUIRED_POOLS."""

    def __init__(self, base_path=None) -> None:
        super().__init__("name_pools.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, NamePoolDef]:
        missing = REQUIRED_POOLS - raw.keys()
        if missing:
            raise DataValidationError(f"name pools missing: {sorted(missing)}")
        pools: Dict[str, NamePoolDef] = {}
        for raw_id, payload in raw.items():
            words = self._require_str_list(payload, f"name pool '{raw_id}'")
            if not words:
                raise DataValidationError(f"name pool '{raw_id}' must not be empty.")
            pools[raw_id] = NamePoolDef(id=raw_id, words=tuple(words))
        return pools
