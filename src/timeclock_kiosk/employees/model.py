from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee shown on the kiosk.

    Note: plain data object; ``rate`` is currency per hour.
    """

    id: str
    name: str
    rate: float

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0]
