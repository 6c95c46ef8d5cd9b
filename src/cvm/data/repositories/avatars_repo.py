"""Avatar catalogue repository."""
from __future__ import annotations

from typing import Dict

from cvm.data.repositories.base import RepositoryBase
from cvm.domain.defs import AvatarDef


class AvatarsRepository(RepositoryBase[AvatarDef]):
    """Loads the capybara avatar catalogue."""

    def __init__(self, base_path=None) -> None:
        super().__init__("avatars.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, AvatarDef]:
        avatars: Dict[str, AvatarDef] = {}
        for raw_id, payload in raw.items():
            avatar_data = self._require_mapping(payload, f"avatar '{raw_id}'")
            self._assert_fields(avatar_data, {"url", "description"}, f"avatar '{raw_id}'")
            avatars[raw_id] = AvatarDef(
                id=raw_id,
                url=self._require_str(avatar_data["url"], f"avatar '{raw_id}' url"),
                description=self._require_str(avatar_data["description"], f"avatar '{raw_id}' description"),
            )
        return avatars

    def find_by_url(self, url: str) -> AvatarDef | None:
        for avatar in self.all():
            if avatar.url == url:
                return avatar
        return None
