from __future__ import annotations

from datetime import datetime
from typing import Optional

from timeclock_kiosk.attendance.model import AttendanceRecord
from timeclock_kiosk.core.enums import AttendanceStatus

PHOTO = "data:image/jpeg;base64,AAAA"


def shift(
    record_id: str,
    employee_id: str,
    clock_in: datetime,
    clock_out: Optional[datetime] = None,
    *,
    name: str = "Anna Ivanova",
) -> AttendanceRecord:
    return AttendanceRecord(
        id=record_id,
        employee_id=employee_id,
        employee_name=name,
        clock_in_time=clock_in,
        clock_in_photo=PHOTO,
        clock_out_time=clock_out,
        clock_out_photo=PHOTO if clock_out else None,
        status=AttendanceStatus.CLOCKED_OUT if clock_out else AttendanceStatus.CLOCKED_IN,
    )
