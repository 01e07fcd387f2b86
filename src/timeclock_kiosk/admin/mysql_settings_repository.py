from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_password_hash(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT password_hash FROM settings WHERE setting_key=%s", (key,))
            r = fetchone(cur)
            return r.get("password_hash") if r else None

    def set_password_hash(self, key: str, password_hash: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO settings(setting_key, password_hash)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE password_hash=VALUES(password_hash)
                """,
                (key, password_hash),
            )
