"""Schedule index: which employees are scheduled on which local calendar day.

Schedules are immutable snapshots. ``set_scheduled`` returns a new mapping and
never keeps an empty set for a date; the date key disappears instead.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Optional

from ..common.datetime_utils import DateLike, to_date_key
from .model import Schedule

_EMPTY: FrozenSet[str] = frozenset()


def get_scheduled(schedule: Optional[Schedule], day: DateLike) -> FrozenSet[str]:
    if not schedule:
        return _EMPTY
    return frozenset(schedule.get(to_date_key(day), _EMPTY))


def set_scheduled(schedule: Optional[Schedule], day: DateLike, employee_ids: Iterable[str]) -> Dict[str, FrozenSet[str]]:
    key = to_date_key(day)
    ids = frozenset(str(i) for i in employee_ids)

    updated: Dict[str, FrozenSet[str]] = dict(schedule or {})
    if ids:
        updated[key] = ids
    else:
        updated.pop(key, None)
    return updated


def is_scheduled(schedule: Optional[Schedule], day: DateLike, employee_id: str) -> bool:
    return employee_id in get_scheduled(schedule, day)


def from_rows(rows: Iterable[tuple[str, str]]) -> Dict[str, FrozenSet[str]]:
    """Build a schedule from ``(date_key, employee_id)`` pairs."""
    grouped: Dict[str, set[str]] = {}
    for date_key, employee_id in rows:
        grouped.setdefault(str(date_key), set()).add(str(employee_id))
    return {k: frozenset(v) for k, v in grouped.items() if v}
