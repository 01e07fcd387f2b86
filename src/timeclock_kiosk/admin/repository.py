from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    def get_password_hash(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_password_hash(self, key: str, password_hash: str) -> None:
        raise NotImplementedError
