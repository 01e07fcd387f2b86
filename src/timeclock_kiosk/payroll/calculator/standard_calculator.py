from __future__ import annotations

from .base import PayrollCalculator
from ...attendance.model import AttendanceRecord


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (out - in) in fractional hours, paid at the hourly rate, unrounded."""

    def shift_hours(self, record: AttendanceRecord) -> float:
        if record.clock_out_time is None:
            return 0.0
        return record.duration_hours()

    def pay(self, hours: float, rate: float) -> float:
        return hours * rate
