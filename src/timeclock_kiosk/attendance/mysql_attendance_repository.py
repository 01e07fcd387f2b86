from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import AttendanceStatus
from ..core.exceptions import ClockActionRejected
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    record_id, employee_id, employee_name,
    clock_in_time, clock_in_photo, clock_out_time, clock_out_photo, status
"""


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_record(r: dict) -> AttendanceRecord:
        return AttendanceRecord(
            id=str(r["record_id"]),
            employee_id=str(r["employee_id"]),
            employee_name=r["employee_name"],
            clock_in_time=r["clock_in_time"],
            clock_in_photo=r["clock_in_photo"],
            clock_out_time=r.get("clock_out_time"),
            clock_out_photo=r.get("clock_out_photo"),
            status=AttendanceStatus(r["status"]),
        )

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records ORDER BY clock_in_time ASC")
            return [self._to_record(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY clock_in_time ASC
                """,
                (employee_id,),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE record_id=%s", (record_id,))
            r = fetchone(cur)
            return self._to_record(r) if r else None

    def create_clock_in(
        self,
        *,
        employee_id: str,
        employee_name: str,
        clock_in_time: datetime,
        clock_in_photo: str,
    ) -> str:
        record_id = new_id()
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        record_id, employee_id, employee_name, clock_in_time, clock_in_photo, status
                    )
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        record_id,
                        employee_id,
                        employee_name,
                        clock_in_time,
                        clock_in_photo,
                        AttendanceStatus.CLOCKED_IN.value,
                    ),
                )
        except mysql.connector.IntegrityError as e:
            if e.errno != errorcode.ER_DUP_ENTRY:
                raise
            # uq_one_open_shift: another device opened a shift first.
            raise ClockActionRejected("Employee already has an open shift") from e
        return record_id

    def close_shift(
        self,
        *,
        record_id: str,
        clock_out_time: datetime,
        clock_out_photo: str,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET clock_out_time=%s, clock_out_photo=%s, status=%s
                WHERE record_id=%s AND status=%s
                """,
                (
                    clock_out_time,
                    clock_out_photo,
                    AttendanceStatus.CLOCKED_OUT.value,
                    record_id,
                    AttendanceStatus.CLOCKED_IN.value,
                ),
            )
            return cur.rowcount > 0
