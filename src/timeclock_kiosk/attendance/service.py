from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_photo
from ..core.enums import ClockAction
from ..core.exceptions import ClockActionRejected, NotFoundError
from ..employees.repository import EmployeeRepository
from ..kiosk.presenter import check_transition, find_open_shift, next_action
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockResult:
    action: ClockAction
    record_id: str
    at: datetime


class ClockService:
    """Use case: clock an employee in or out from the kiosk terminal.

    Note: the one-open-shift rule is a check-then-act over the current
    records; the MySQL schema backs it with a unique key.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def _employee(self, employee_id: str):
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def next_action(self, employee_id: str) -> ClockAction:
        self._employee(employee_id)
        return next_action(self._attendance.list_for_employee(employee_id), employee_id)

    def open_shift(self, employee_id: str) -> Optional[AttendanceRecord]:
        self._employee(employee_id)
        return find_open_shift(self._attendance.list_for_employee(employee_id), employee_id)

    def clock(
        self,
        employee_id: str,
        action: ClockAction,
        photo: str,
        *,
        now: Optional[datetime] = None,
    ) -> ClockResult:
        now = now or now_local()
        photo = require_photo(photo)
        employee = self._employee(employee_id)
        records = self._attendance.list_for_employee(employee_id)

        try:
            open_shift = check_transition(records, employee_id, action)
        except ClockActionRejected:
            logger.warning("Rejected %s for employee %s", action.value, employee_id)
            raise

        if action == ClockAction.CLOCK_IN:
            record_id = self._attendance.create_clock_in(
                employee_id=employee.id,
                employee_name=employee.name,
                clock_in_time=now,
                clock_in_photo=photo,
            )
        else:
            record_id = open_shift.id
            if not self._attendance.close_shift(record_id=record_id, clock_out_time=now, clock_out_photo=photo):
                # Closed by another terminal between the read and the write.
                raise ClockActionRejected("No open shift to finish")

        logger.info("%s %s at %s", employee.name, action.value, now.isoformat(timespec="seconds"))
        return ClockResult(action=action, record_id=record_id, at=now)

    def clock_in(self, employee_id: str, photo: str, *, now: Optional[datetime] = None) -> ClockResult:
        return self.clock(employee_id, ClockAction.CLOCK_IN, photo, now=now)

    def clock_out(self, employee_id: str, photo: str, *, now: Optional[datetime] = None) -> ClockResult:
        return self.clock(employee_id, ClockAction.CLOCK_OUT, photo, now=now)

    def toggle(self, employee_id: str, photo: str, *, now: Optional[datetime] = None) -> ClockResult:
        """Start a shift when idle, finish it when one is open."""
        return self.clock(employee_id, self.next_action(employee_id), photo, now=now)
