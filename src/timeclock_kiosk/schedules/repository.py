from __future__ import annotations

from typing import FrozenSet, Iterable, Protocol

from .model import Schedule


class ScheduleRepository(Protocol):
    def load(self) -> Schedule:
        """Full snapshot of every stored date."""

        raise NotImplementedError

    def get_for_date(self, date_key: str) -> FrozenSet[str]:
        raise NotImplementedError

    def replace(self, date_key: str, employee_ids: Iterable[str]) -> None:
        """Replace the set for ``date_key``; an empty set deletes the date."""

        raise NotImplementedError
