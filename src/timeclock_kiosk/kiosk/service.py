from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Set

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local, to_date_key
from ..employees.repository import EmployeeRepository
from ..schedules.repository import ScheduleRepository
from .presenter import KioskTile, derive


@dataclass
class CalendarDay:
    date_key: str
    scheduled: Set[str] = field(default_factory=set)
    attended: Set[str] = field(default_factory=set)

    def to_dict(self) -> dict:
        names = sorted(self.scheduled | self.attended)
        return {
            "date": self.date_key,
            "names": [{"name": n, "attended": n in self.attended} for n in names],
        }


class KioskService:
    """Read side of the kiosk screen: employee tiles and the shift calendar."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        schedules: ScheduleRepository,
    ):
        self._employees = employees
        self._attendance = attendance
        self._schedules = schedules

    def tiles(self, *, now: Optional[datetime] = None) -> List[KioskTile]:
        now = now or now_local()
        records = list(self._attendance.list_all())
        schedule = self._schedules.load()
        return [derive(emp, records, schedule, now) for emp in self._employees.list_all()]

    def attendance_by_date(self) -> Dict[str, Set[str]]:
        """Date key -> first names of everyone who clocked in that day."""
        out: Dict[str, Set[str]] = {}
        for r in self._attendance.list_all():
            out.setdefault(to_date_key(r.clock_in_time), set()).add(r.employee_name.split(" ")[0])
        return out

    def calendar_month(self, month: date) -> List[CalendarDay]:
        employees = {e.id: e for e in self._employees.list_all()}
        schedule = self._schedules.load()
        attended = self.attendance_by_date()

        first = month.replace(day=1)
        days: List[CalendarDay] = []
        for offset in range(monthrange(first.year, first.month)[1]):
            key = to_date_key(first + timedelta(days=offset))
            scheduled = {employees[i].first_name for i in schedule.get(key, ()) if i in employees}
            days.append(CalendarDay(date_key=key, scheduled=scheduled, attended=set(attended.get(key, ()))))
        return days
