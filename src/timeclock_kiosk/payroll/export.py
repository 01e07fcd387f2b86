from __future__ import annotations

import io
from typing import Sequence

import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from .model import ReportRow

SUMMARY_SHEET = "Summary"
SHIFTS_SHEET = "All Shifts"

SUMMARY_COLUMNS = ["Employee", "Rate", "Total Hours", "Total Pay"]
SHIFT_COLUMNS = ["Employee", "Clock-in Date", "Clock-in Time", "Clock-out Date", "Clock-out Time", "Shift Hours"]


def summary_frame(rows: Sequence[ReportRow]) -> pd.DataFrame:
    data = [
        {
            "Employee": row.employee.name,
            "Rate": row.employee.rate,
            "Total Hours": f"{row.total_hours:.2f}",
            "Total Pay": f"{row.total_pay:.2f}",
        }
        for row in rows
    ]
    return pd.DataFrame(data, columns=SUMMARY_COLUMNS)


def shifts_frame(rows: Sequence[ReportRow]) -> pd.DataFrame:
    data = []
    for row in rows:
        for shift in row.shifts:
            if shift.clock_out_time is None:
                continue
            data.append(
                {
                    "Employee": row.employee.name,
                    "Clock-in Date": shift.clock_in_time.strftime("%d.%m.%Y"),
                    "Clock-in Time": shift.clock_in_time.strftime("%H:%M:%S"),
                    "Clock-out Date": shift.clock_out_time.strftime("%d.%m.%Y"),
                    "Clock-out Time": shift.clock_out_time.strftime("%H:%M:%S"),
                    "Shift Hours": f"{shift.duration_hours():.2f}",
                }
            )
    return pd.DataFrame(data, columns=SHIFT_COLUMNS)


def _style_sheet(ws) -> None:
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for idx, column in enumerate(ws.columns, start=1):
        width = max(len(str(c.value)) if c.value is not None else 0 for c in column)
        ws.column_dimensions[get_column_letter(idx)].width = max(width + 2, 12)


def write_payroll_workbook(rows: Sequence[ReportRow]) -> io.BytesIO:
    """Two-sheet xlsx: per-employee summary and every counted shift."""
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        summary_frame(rows).to_excel(writer, sheet_name=SUMMARY_SHEET, index=False)
        shifts_frame(rows).to_excel(writer, sheet_name=SHIFTS_SHEET, index=False)
        for ws in writer.book.worksheets:
            _style_sheet(ws)
    out.seek(0)
    return out
