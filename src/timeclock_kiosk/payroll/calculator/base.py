from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRecord


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def shift_hours(self, record: AttendanceRecord) -> float:
        raise NotImplementedError

    @abstractmethod
    def pay(self, hours: float, rate: float) -> float:
        raise NotImplementedError
