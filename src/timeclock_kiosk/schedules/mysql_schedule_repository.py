from __future__ import annotations

from typing import FrozenSet, Iterable

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .index import from_rows
from .model import Schedule
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Schedule:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date_key, employee_id FROM schedules ORDER BY date_key ASC")
            return from_rows((r["date_key"], r["employee_id"]) for r in fetchall(cur))

    def get_for_date(self, date_key: str) -> FrozenSet[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id FROM schedules WHERE date_key=%s", (date_key,))
            return frozenset(str(r["employee_id"]) for r in fetchall(cur))

    def replace(self, date_key: str, employee_ids: Iterable[str]) -> None:
        ids = sorted(set(employee_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM schedules WHERE date_key=%s", (date_key,))
            if ids:
                cur.executemany(
                    "INSERT INTO schedules(date_key, employee_id) VALUES(%s,%s)",
                    [(date_key, i) for i in ids],
                )
