from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..attendance.model import AttendanceRecord
from ..employees.model import Employee


@dataclass(frozen=True)
class ReportRow:
    """Derived, non-persisted aggregate of one employee over a date range."""

    employee: Employee
    total_hours: float = 0.0
    total_pay: float = 0.0
    shifts: Tuple[AttendanceRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee.id,
            "name": self.employee.name,
            "rate": self.employee.rate,
            "total_hours": round(self.total_hours, 2),
            "total_pay": round(self.total_pay, 2),
            "shifts": [
                {
                    "id": s.id,
                    "clock_in_time": s.clock_in_time.isoformat(),
                    "clock_out_time": s.clock_out_time.isoformat() if s.clock_out_time else None,
                    "clock_in_photo": s.clock_in_photo,
                    "clock_out_photo": s.clock_out_photo,
                    "hours": round(s.duration_hours(), 2),
                }
                for s in self.shifts
            ],
        }
