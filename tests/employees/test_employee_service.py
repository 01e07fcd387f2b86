from __future__ import annotations

import io
from datetime import datetime

import pandas as pd
import pytest

from helpers import PHOTO
from timeclock_kiosk.core.exceptions import NotFoundError, ValidationError


def _xlsx(frame: pd.DataFrame) -> io.BytesIO:
    out = io.BytesIO()
    frame.to_excel(out, index=False, engine="openpyxl")
    out.seek(0)
    return out


def test_add_and_update(container):
    svc = container.employee_service

    emp = svc.add(name="  Clara Petrova ", rate="410,5")
    assert (emp.name, emp.rate) == ("Clara Petrova", 410.5)

    svc.update(emp.id, name="Clara P.", rate=420)
    assert svc.get(emp.id).rate == 420


def test_add_rejects_bad_rate(container):
    with pytest.raises(ValidationError):
        container.employee_service.add(name="Clara", rate="abc")
    assert len(container.employee_service.list_all()) == 2


def test_update_and_delete_unknown(container):
    with pytest.raises(NotFoundError):
        container.employee_service.update("missing", name="X", rate=1)
    with pytest.raises(NotFoundError):
        container.employee_service.delete("missing")


def test_delete_cascades_attendance(container, fixed_now):
    container.clock_service.clock_in("e1", PHOTO, now=fixed_now)

    container.employee_service.delete("e1")

    assert container.attendance_repo.list_all() == []


def test_import_counts_added_and_failed(container):
    frame = pd.DataFrame(
        {
            "Name": ["Clara Petrova", None, "Dmitry Sokolov", "Egor Lebedev"],
            "Rate": [410, 300, "n/a", "380,5"],
        }
    )

    result = container.employee_service.import_xlsx(_xlsx(frame))

    assert (result.imported, result.failed) == (2, 2)
    names = {e.name: e.rate for e in container.employee_service.list_all()}
    assert names["Egor Lebedev"] == 380.5


def test_import_column_names_are_case_insensitive(container):
    result = container.employee_service.import_xlsx(_xlsx(pd.DataFrame({"name": ["Clara"], "RATE": [100]})))
    assert result.imported == 1


def test_import_rejects_wrong_columns(container):
    with pytest.raises(ValidationError):
        container.employee_service.import_xlsx(_xlsx(pd.DataFrame({"Employee": ["Clara"], "Pay": [1]})))


def test_import_rejects_empty_and_unreadable_files(container):
    with pytest.raises(ValidationError):
        container.employee_service.import_xlsx(_xlsx(pd.DataFrame({"Name": [], "Rate": []})))
    with pytest.raises(ValidationError):
        container.employee_service.import_xlsx(io.BytesIO(b"not a spreadsheet"))


def test_long_names_and_precise_rates_rejected(container):
    with pytest.raises(ValidationError):
        container.employee_service.add(name="x" * 151, rate=100)
    with pytest.raises(ValidationError):
        container.employee_service.add(name="Clara", rate="410.555")


def test_import_skips_rows_the_table_cannot_store(container):
    frame = pd.DataFrame({"Name": ["x" * 151, "Clara Petrova", "Dmitry"], "Rate": [100, 410, 410.555]})

    result = container.employee_service.import_xlsx(_xlsx(frame))

    assert (result.imported, result.failed) == (1, 2)
