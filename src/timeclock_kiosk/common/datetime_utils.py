from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

from ..core.constants import DATE_KEY_FORMAT, MONTH_KEY_FORMAT, MS_PER_HOUR, MS_PER_MINUTE

# Date keys ('YYYY-MM-DD') are accepted wherever a date is.
DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, MONTH_KEY_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_local(value: datetime) -> datetime:
    """Naive local datetime for ``value``.

    Naive datetimes are already local; aware ones are converted to the
    system zone and stripped so they compare with naive day bounds.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def local_date(value: DateLike) -> date:
    if isinstance(value, str):
        return parse_iso_date(value)
    if isinstance(value, datetime):
        return to_local(value).date()
    return value


def to_date_key(value: DateLike) -> str:
    """Calendar date of ``value`` in local time as ``YYYY-MM-DD``.

    23:30 local on 2024-03-05 keys to "2024-03-05" even when the UTC date
    is already the 6th.
    """
    return local_date(value).strftime(DATE_KEY_FORMAT)


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(local_date(value), time.min)


def end_of_day(value: DateLike) -> datetime:
    return datetime.combine(local_date(value), time.max)


def elapsed_ms(start: datetime, end: datetime) -> float:
    return (to_local(end) - to_local(start)).total_seconds() * 1000


def hours_between(start: datetime, end: datetime) -> float:
    return elapsed_ms(start, end) / MS_PER_HOUR


def minutes_between(start: datetime, end: datetime) -> float:
    return elapsed_ms(start, end) / MS_PER_MINUTE


def format_duration(ms: float) -> str:
    """Live timer text: ``2h 05m 09s``, ``5m 09s`` or ``9s``."""
    total_seconds = int(max(ms, 0) // 1000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"
    if minutes > 0:
        return f"{minutes}m {seconds:02d}s"
    return f"{seconds}s"


def format_shift_duration(ms: float) -> str:
    """Shift total text: ``7h 30m`` or ``45m``."""
    total_minutes = int(max(ms, 0) // 60_000)
    hours, minutes = divmod(total_minutes, 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
