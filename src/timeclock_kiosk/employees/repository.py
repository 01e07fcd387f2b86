from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, rate: float) -> str:
        """Insert an employee and return the new opaque id."""

        raise NotImplementedError

    def update(self, employee_id: str, *, name: str, rate: float) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        """Delete the employee together with their attendance records."""

        raise NotImplementedError
