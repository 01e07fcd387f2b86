from __future__ import annotations

import logging
from typing import IO, Sequence, Union

from ..common.validators import parse_rate, require_non_empty
from ..core.constants import EMPLOYEE_NAME_MAX_LENGTH
from ..core.exceptions import NotFoundError, ValidationError
from .importer import ImportResult, read_employee_rows
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def add(self, *, name, rate) -> Employee:
        name = require_non_empty(name, "Name", max_length=EMPLOYEE_NAME_MAX_LENGTH)
        rate = parse_rate(rate)
        employee_id = self._employees.create(name=name, rate=rate)
        logger.info("Added employee %s (%s)", name, employee_id)
        return Employee(id=employee_id, name=name, rate=rate)

    def update(self, employee_id: str, *, name, rate) -> Employee:
        name = require_non_empty(name, "Name", max_length=EMPLOYEE_NAME_MAX_LENGTH)
        rate = parse_rate(rate)
        if not self._employees.update(employee_id, name=name, rate=rate):
            raise NotFoundError("Employee not found")
        return Employee(id=employee_id, name=name, rate=rate)

    def delete(self, employee_id: str) -> None:
        if not self._employees.delete(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)

    def import_xlsx(self, source: Union[str, IO[bytes]]) -> ImportResult:
        imported = failed = 0
        for name, rate in read_employee_rows(source):
            try:
                self.add(name=name, rate=rate)
            except ValidationError:
                failed += 1
            else:
                imported += 1
        logger.info("Employee import finished: %d added, %d failed", imported, failed)
        return ImportResult(imported=imported, failed=failed)
