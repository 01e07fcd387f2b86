"""Attendance aggregation for payroll reports.

A shift counts toward a report when it is clocked out, started no earlier than
the start of ``start_date`` and ended no later than the end of ``end_date``
(both local calendar days). Open shifts never count.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import DateLike, end_of_day, start_of_day, to_local
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import ReportRow


def in_range(record: AttendanceRecord, start: datetime, end: datetime) -> bool:
    if not record.is_completed:
        return False
    return to_local(record.clock_in_time) >= start and to_local(record.clock_out_time) <= end


def compute_report(
    employees: Sequence[Employee],
    records: Iterable[AttendanceRecord],
    start_date: DateLike,
    end_date: DateLike,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> List[ReportRow]:
    calculator = calculator or StandardPayrollCalculator()
    start = start_of_day(start_date)
    end = end_of_day(end_date)

    shifts_by_employee: Dict[str, List[AttendanceRecord]] = {}
    for r in records:
        if in_range(r, start, end):
            shifts_by_employee.setdefault(r.employee_id, []).append(r)

    rows: List[ReportRow] = []
    for emp in employees:
        shifts = sorted(shifts_by_employee.get(emp.id, []), key=lambda s: to_local(s.clock_in_time))
        total_hours = 0.0
        for s in shifts:
            total_hours += calculator.shift_hours(s)
        rows.append(
            ReportRow(
                employee=emp,
                total_hours=total_hours,
                total_pay=calculator.pay(total_hours, emp.rate),
                shifts=tuple(shifts),
            )
        )
    return rows
