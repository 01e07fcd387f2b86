from __future__ import annotations

import logging
from typing import FrozenSet, Iterable

from ..common.datetime_utils import DateLike, to_date_key
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .index import get_scheduled, set_scheduled
from .model import Schedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository, employees: EmployeeRepository):
        self._schedules = schedules
        self._employees = employees

    def snapshot(self) -> Schedule:
        return self._schedules.load()

    def get_for_date(self, day: DateLike) -> FrozenSet[str]:
        return get_scheduled(self._schedules.load(), day)

    def update(self, *, day: DateLike, employee_ids: Iterable[str]) -> FrozenSet[str]:
        """Replace who is scheduled on ``day``; an empty list clears the date."""
        ids = [require_non_empty(i, "Employee id") for i in employee_ids]

        known = {e.id for e in self._employees.list_all()}
        unknown = sorted(set(ids) - known)
        if unknown:
            raise ValidationError(f"Unknown employees: {', '.join(unknown)}")

        key = to_date_key(day)
        updated = set_scheduled(self._schedules.load(), day, ids)
        scheduled = get_scheduled(updated, day)
        self._schedules.replace(key, scheduled)

        if scheduled:
            logger.info("Schedule %s set to %d employee(s)", key, len(scheduled))
        else:
            logger.info("Schedule %s cleared", key)
        return scheduled
