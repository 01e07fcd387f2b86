from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import elapsed_ms, hours_between
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one shift (clock-in/clock-out pair), possibly still open."""

    id: str
    employee_id: str
    employee_name: str
    clock_in_time: datetime
    clock_in_photo: str
    clock_out_time: Optional[datetime] = None
    clock_out_photo: Optional[str] = None
    status: AttendanceStatus = AttendanceStatus.CLOCKED_IN

    @property
    def is_open(self) -> bool:
        return self.status == AttendanceStatus.CLOCKED_IN

    @property
    def is_completed(self) -> bool:
        return self.status == AttendanceStatus.CLOCKED_OUT and self.clock_out_time is not None

    def duration_ms(self) -> float:
        if self.clock_out_time is None:
            return 0.0
        return elapsed_ms(self.clock_in_time, self.clock_out_time)

    def duration_hours(self) -> float:
        if self.clock_out_time is None:
            return 0.0
        return hours_between(self.clock_in_time, self.clock_out_time)
