from __future__ import annotations

from datetime import date, datetime

import pytest
from openpyxl import load_workbook

from helpers import PHOTO
from timeclock_kiosk.core.exceptions import ValidationError


@pytest.fixture
def worked(container):
    clock = container.clock_service
    clock.clock_in("e1", PHOTO, now=datetime(2024, 3, 5, 9, 0))
    clock.clock_out("e1", PHOTO, now=datetime(2024, 3, 5, 11, 0))
    clock.clock_in("e1", PHOTO, now=datetime(2024, 3, 6, 13, 0))
    clock.clock_out("e1", PHOTO, now=datetime(2024, 3, 6, 14, 30))
    return container


def test_report_totals(worked):
    rows = worked.payroll_report_service.build_report(start=date(2024, 3, 1), end=date(2024, 3, 31))

    by_id = {r.employee.id: r for r in rows}
    assert by_id["e1"].to_dict()["total_hours"] == 3.5
    assert by_id["e1"].to_dict()["total_pay"] == 1050
    assert by_id["e2"].to_dict()["total_pay"] == 0


def test_start_after_end_is_rejected(container):
    with pytest.raises(ValidationError):
        container.payroll_report_service.build_report(start=date(2024, 3, 2), end=date(2024, 3, 1))


def test_export_writes_summary_and_shift_sheets(worked):
    out, filename = worked.payroll_report_service.export_xlsx(start=date(2024, 3, 1), end=date(2024, 3, 31))

    assert filename == "payroll_report_2024-03-01_2024-03-31.xlsx"

    wb = load_workbook(out)
    assert wb.sheetnames == ["Summary", "All Shifts"]

    summary = list(wb["Summary"].iter_rows(values_only=True))
    assert summary[0] == ("Employee", "Rate", "Total Hours", "Total Pay")
    assert summary[1][0] == "Anna Ivanova"
    assert summary[1][2:] == ("3.50", "1050.00")

    shifts = list(wb["All Shifts"].iter_rows(values_only=True))
    assert len(shifts) == 3
    assert shifts[1][1:3] == ("05.03.2024", "09:00:00")
    assert wb["Summary"]["A1"].font.bold
