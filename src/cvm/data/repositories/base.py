"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from cvm.core.types import ABILITY_KINDS, EFFECT_KINDS
from cvm.data.errors import DataValidationError
from cvm.data.json_loader import load_json_object
from cvm.data import paths
from cvm.domain.defs import AbilityTemplateDef
from cvm.domain.entities import AbilityEffect

T = TypeVar("T")

_ABILITY_FIELDS = {"name", "description", "kind"}
_EFFECT_FIELDS = {"kind", "value"}


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        return load_json_object(self._get_file_path())

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise DataValidationError(f"{context} must be a non-empty string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_literal(value: object, allowed: set[str] | frozenset[str], context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        if value not in allowed:
            raise DataValidationError(f"{context} must be one of {sorted(allowed)}.")
        return value

    @classmethod
    def _require_str_list(cls, value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return [cls._require_str(entry, f"{context} entry") for entry in value]

    @staticmethod
    def _assert_fields(
        payload: dict[str, object],
        expected_keys: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = optional_fields or set()
        missing = expected_keys - actual_keys
        unknown = actual_keys - expected_keys - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")

    @classmethod
    def _require_ability_list(cls, value: object, context: str, *, count: int) -> List[AbilityTemplateDef]:
        """Parse exactly ``count`` ability templates; the generator relies on full tables."""
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        if len(value) != count:
            raise DataValidationError(f"{context} must hold exactly {count} abilities, found {len(value)}.")
        return [cls._parse_ability(entry, f"{context}[{idx}]") for idx, entry in enumerate(value)]

    @classmethod
    def _parse_ability(cls, value: object, context: str) -> AbilityTemplateDef:
        payload = cls._require_mapping(value, context)
        cls._assert_fields(payload, _ABILITY_FIELDS, context, optional_fields={"effect"})
        kind = cls._require_literal(payload["kind"], ABILITY_KINDS - {"ultimate"}, f"{context} kind")
        effect = None
        if payload.get("effect") is not None:
            effect = cls._parse_effect(payload["effect"], f"{context} effect")
        return AbilityTemplateDef(
            name=cls._require_str(payload["name"], f"{context} name"),
            description=cls._require_str(payload["description"], f"{context} description"),
            kind=kind,  # type: ignore[arg-type]
            effect=effect,
        )

    @classmethod
    def _parse_effect(cls, value: object, context: str) -> AbilityEffect:
        payload = cls._require_mapping(value, context)
        cls._assert_fields(payload, _EFFECT_FIELDS, context, optional_fields={"duration"})
        kind = cls._require_literal(payload["kind"], EFFECT_KINDS, f"{context} kind")
        effect_value = cls._require_int(payload["value"], f"{context} value")
        if effect_value < 0:
            raise DataValidationError(f"{context} value must be >= 0.")
        duration = None
        if payload.get("duration") is not None:
            duration = cls._require_int(payload["duration"], f"{context} duration")
            if duration <= 0:
                raise DataValidationError(f"{context} duration must be > 0.")
        return AbilityEffect(kind=kind, value=effect_value, duration=duration)  # type: ignore[arg-type]
