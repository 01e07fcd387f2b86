from __future__ import annotations

import io
import logging
from datetime import date
from typing import List, Optional, Tuple

from ..attendance.repository import AttendanceRepository
from ..core.constants import EXPORT_FILENAME_TEMPLATE
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .aggregator import compute_report
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .export import write_payroll_workbook
from .model import ReportRow

logger = logging.getLogger(__name__)


class PayrollReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        filename_template: str = EXPORT_FILENAME_TEMPLATE,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()
        self._filename_template = filename_template

    def build_report(self, *, start: date, end: date) -> List[ReportRow]:
        if start > end:
            raise ValidationError("Start date must not be after end date")

        return compute_report(
            list(self._employees.list_all()),
            list(self._attendance.list_all()),
            start,
            end,
            calculator=self._calculator,
        )

    def export_xlsx(self, *, start: date, end: date) -> Tuple[io.BytesIO, str]:
        rows = self.build_report(start=start, end=end)
        filename = self._filename_template.format(start=start.isoformat(), end=end.isoformat())
        logger.info("Exporting payroll %s (%d employees)", filename, len(rows))
        return write_payroll_workbook(rows), filename
