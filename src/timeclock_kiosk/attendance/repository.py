from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_clock_in(
        self,
        *,
        employee_id: str,
        employee_name: str,
        clock_in_time: datetime,
        clock_in_photo: str,
    ) -> str:
        """Open a shift and return the record id.

        Implementations backed by a constraint raise ClockActionRejected
        when the employee already has an open shift.
        """

        raise NotImplementedError

    def close_shift(
        self,
        *,
        record_id: str,
        clock_out_time: datetime,
        clock_out_photo: str,
    ) -> bool:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError
