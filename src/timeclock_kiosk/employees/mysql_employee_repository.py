from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_employee(r: dict) -> Employee:
        return Employee(id=str(r["employee_id"]), name=r["name"], rate=float(r["rate"]))

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, name, rate FROM employees ORDER BY created_at ASC, name ASC")
            return [self._to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, name, rate FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return self._to_employee(r) if r else None

    def create(self, *, name: str, rate: float) -> str:
        employee_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(employee_id, name, rate) VALUES(%s,%s,%s)",
                (employee_id, name, rate),
            )
        return employee_id

    def update(self, employee_id: str, *, name: str, rate: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET name=%s, rate=%s WHERE employee_id=%s",
                (name, rate, employee_id),
            )
            # rowcount is 0 when values are unchanged; confirm the row exists instead.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def delete(self, employee_id: str) -> bool:
        # schedules cascade via foreign key; attendance rows are removed in the same transaction.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE employee_id=%s", (employee_id,))
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
