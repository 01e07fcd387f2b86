"""In-memory repositories.

Used for demo mode and tests. Nothing survives a restart. Employee deletion
also drops that employee's attendance and schedule entries.
"""

from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import datetime
from typing import Dict, FrozenSet, Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus
from ..core.exceptions import ClockActionRejected
from ..employees.model import Employee
from ..schedules.index import get_scheduled, set_scheduled
from ..schedules.model import Schedule


class MemoryStore:
    """Shared state behind the in-memory repositories."""

    def __init__(self, *, id_prefix: str = "mem"):
        self.employees: Dict[str, Employee] = {}
        self.attendance: Dict[str, AttendanceRecord] = {}
        self.schedule: Dict[str, FrozenSet[str]] = {}
        self.settings: Dict[str, str] = {}
        self._ids = itertools.count(1)
        self._prefix = id_prefix

    def next_id(self, kind: str) -> str:
        return f"{self._prefix}-{kind}-{next(self._ids)}"


class InMemoryEmployeeRepository:
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return list(self._store.employees.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._store.employees.get(employee_id)

    def create(self, *, name: str, rate: float) -> str:
        employee_id = self._store.next_id("emp")
        self._store.employees[employee_id] = Employee(id=employee_id, name=name, rate=rate)
        return employee_id

    def add(self, employee: Employee) -> None:
        self._store.employees[employee.id] = employee

    def update(self, employee_id: str, *, name: str, rate: float) -> bool:
        if employee_id not in self._store.employees:
            return False
        self._store.employees[employee_id] = Employee(id=employee_id, name=name, rate=rate)
        return True

    def delete(self, employee_id: str) -> bool:
        if self._store.employees.pop(employee_id, None) is None:
            return False
        self._store.attendance = {
            k: r for k, r in self._store.attendance.items() if r.employee_id != employee_id
        }
        self._store.schedule = {
            k: ids - {employee_id} for k, ids in self._store.schedule.items() if ids - {employee_id}
        }
        return True


class InMemoryAttendanceRepository:
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        return sorted(self._store.attendance.values(), key=lambda r: r.clock_in_time)

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self.list_all() if r.employee_id == employee_id]

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._store.attendance.get(record_id)

    def add(self, record: AttendanceRecord) -> None:
        self._store.attendance[record.id] = record

    def create_clock_in(
        self,
        *,
        employee_id: str,
        employee_name: str,
        clock_in_time: datetime,
        clock_in_photo: str,
    ) -> str:
        if any(r.employee_id == employee_id and r.is_open for r in self._store.attendance.values()):
            raise ClockActionRejected("Employee already has an open shift")
        record_id = self._store.next_id("att")
        self._store.attendance[record_id] = AttendanceRecord(
            id=record_id,
            employee_id=employee_id,
            employee_name=employee_name,
            clock_in_time=clock_in_time,
            clock_in_photo=clock_in_photo,
        )
        return record_id

    def close_shift(self, *, record_id: str, clock_out_time: datetime, clock_out_photo: str) -> bool:
        record = self._store.attendance.get(record_id)
        if record is None or not record.is_open:
            return False
        self._store.attendance[record_id] = replace(
            record,
            clock_out_time=clock_out_time,
            clock_out_photo=clock_out_photo,
            status=AttendanceStatus.CLOCKED_OUT,
        )
        return True


class InMemoryScheduleRepository:
    def __init__(self, store: MemoryStore):
        self._store = store

    def load(self) -> Schedule:
        return dict(self._store.schedule)

    def get_for_date(self, date_key: str) -> FrozenSet[str]:
        return get_scheduled(self._store.schedule, date_key)

    def replace(self, date_key: str, employee_ids: Iterable[str]) -> None:
        self._store.schedule = set_scheduled(self._store.schedule, date_key, employee_ids)


class InMemorySettingsRepository:
    def __init__(self, store: MemoryStore):
        self._store = store

    def get_password_hash(self, key: str) -> Optional[str]:
        return self._store.settings.get(key)

    def set_password_hash(self, key: str, password_hash: str) -> None:
        self._store.settings[key] = password_hash

