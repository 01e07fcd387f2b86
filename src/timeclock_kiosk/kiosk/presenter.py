"""Kiosk tile state and the per-employee clock state machine.

State precedence for a tile: an open shift makes the employee ``active``;
otherwise being on today's schedule makes them ``scheduled``; otherwise
``idle``. Clock actions move ``idle -> active`` (clock-in) and
``active -> idle`` (clock-out); anything else is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import format_duration, format_shift_duration, minutes_between, to_date_key, to_local
from ..core.enums import ClockAction, KioskState
from ..core.exceptions import ClockActionRejected
from ..employees.model import Employee
from ..schedules.index import is_scheduled
from ..schedules.model import Schedule


@dataclass(frozen=True)
class KioskTile:
    employee: Employee
    state: KioskState
    open_shift: Optional[AttendanceRecord] = None
    last_completed_shift: Optional[AttendanceRecord] = None
    minutes_worked_today: Optional[float] = None

    def to_dict(self, now: datetime) -> dict:
        data = {
            "employee_id": self.employee.id,
            "name": self.employee.name,
            "state": self.state.value,
            "open_shift": None,
            "last_completed_shift": None,
            "minutes_worked_today": self.minutes_worked_today,
        }
        if self.open_shift is not None:
            elapsed = (to_local(now) - to_local(self.open_shift.clock_in_time)).total_seconds() * 1000
            data["open_shift"] = {
                "id": self.open_shift.id,
                "clock_in_time": self.open_shift.clock_in_time.isoformat(),
                "elapsed": format_duration(elapsed),
                "total_today": format_shift_duration((self.minutes_worked_today or 0) * 60_000),
            }
        if self.last_completed_shift is not None:
            last = self.last_completed_shift
            data["last_completed_shift"] = {
                "id": last.id,
                "clock_in_time": last.clock_in_time.isoformat(),
                "clock_out_time": last.clock_out_time.isoformat() if last.clock_out_time else None,
                "total": format_shift_duration(last.duration_ms()),
            }
        return data


def _own(records: Iterable[AttendanceRecord], employee_id: str) -> list[AttendanceRecord]:
    return [r for r in records if r.employee_id == employee_id]


def find_open_shift(records: Iterable[AttendanceRecord], employee_id: str) -> Optional[AttendanceRecord]:
    for r in records:
        if r.employee_id == employee_id and r.is_open:
            return r
    return None


def last_completed_shift(records: Iterable[AttendanceRecord], employee_id: str) -> Optional[AttendanceRecord]:
    completed = [r for r in _own(records, employee_id) if r.is_completed]
    if not completed:
        return None
    return max(completed, key=lambda r: to_local(r.clock_out_time))


def minutes_worked_today(
    records: Iterable[AttendanceRecord],
    employee_id: str,
    open_shift: AttendanceRecord,
    now: datetime,
) -> float:
    today = to_date_key(now)
    total = 0.0
    for r in _own(records, employee_id):
        if r.is_completed and to_date_key(r.clock_in_time) == today:
            total += minutes_between(r.clock_in_time, r.clock_out_time)
    return total + minutes_between(open_shift.clock_in_time, now)


def derive(
    employee: Employee,
    records: Iterable[AttendanceRecord],
    schedule: Optional[Schedule],
    now: datetime,
) -> KioskTile:
    records = list(records)
    open_shift = find_open_shift(records, employee.id)
    last = last_completed_shift(records, employee.id)

    if open_shift is not None:
        return KioskTile(
            employee=employee,
            state=KioskState.ACTIVE,
            open_shift=open_shift,
            last_completed_shift=last,
            minutes_worked_today=minutes_worked_today(records, employee.id, open_shift, now),
        )

    state = KioskState.SCHEDULED if is_scheduled(schedule, now, employee.id) else KioskState.IDLE
    return KioskTile(employee=employee, state=state, last_completed_shift=last)


def next_action(records: Iterable[AttendanceRecord], employee_id: str) -> ClockAction:
    """Action offered by the clock terminal for this employee."""
    if find_open_shift(records, employee_id) is not None:
        return ClockAction.CLOCK_OUT
    return ClockAction.CLOCK_IN


def check_transition(
    records: Iterable[AttendanceRecord],
    employee_id: str,
    action: ClockAction,
) -> Optional[AttendanceRecord]:
    """Validate ``action`` against the employee's current state.

    Returns the open shift for a clock-out (None for a clock-in); raises
    ClockActionRejected when the action is not allowed.
    """
    open_shift = find_open_shift(records, employee_id)
    if action == ClockAction.CLOCK_IN:
        if open_shift is not None:
            raise ClockActionRejected("Shift already started")
        return None
    if open_shift is None:
        raise ClockActionRejected("No open shift to finish")
    return open_shift
