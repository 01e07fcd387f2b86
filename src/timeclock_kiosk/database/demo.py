"""Demo data for running the kiosk without a database."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local, to_date_key
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .memory_store import MemoryStore

# 1x1 transparent gif, stands in for webcam snapshots.
PLACEHOLDER_PHOTO = "data:image/gif;base64,R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"

DEMO_EMPLOYEES = (
    Employee(id="demo1", name="Ivan Petrov (Demo)", rate=350.0),
    Employee(id="demo2", name="Maria Sidorova (Demo)", rate=400.0),
    Employee(id="demo3", name="Alexey Smirnov (Demo)", rate=375.0),
)


def seed_demo(store: MemoryStore, *, now: Optional[datetime] = None) -> MemoryStore:
    """Three employees, one open shift (2h), one finished shift and today's schedule."""
    now = now or now_local()

    for emp in DEMO_EMPLOYEES:
        store.employees[emp.id] = emp

    ivan, maria, alexey = DEMO_EMPLOYEES
    store.attendance["att-demo1"] = AttendanceRecord(
        id="att-demo1",
        employee_id=ivan.id,
        employee_name=ivan.name,
        clock_in_time=now - timedelta(hours=2),
        clock_in_photo=PLACEHOLDER_PHOTO,
    )
    store.attendance["att-demo2"] = AttendanceRecord(
        id="att-demo2",
        employee_id=maria.id,
        employee_name=maria.name,
        clock_in_time=now - timedelta(hours=9),
        clock_in_photo=PLACEHOLDER_PHOTO,
        clock_out_time=now - timedelta(hours=1),
        clock_out_photo=PLACEHOLDER_PHOTO,
        status=AttendanceStatus.CLOCKED_OUT,
    )
    store.schedule[to_date_key(now)] = frozenset({ivan.id, alexey.id})
    return store
