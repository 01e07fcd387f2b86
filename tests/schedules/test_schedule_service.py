from datetime import date

import pytest

from timeclock_kiosk.core.exceptions import ValidationError


def test_update_and_clear(container, store):
    svc = container.schedule_service

    assert svc.update(day=date(2024, 3, 5), employee_ids=["e1", "e2"]) == {"e1", "e2"}
    assert svc.get_for_date("2024-03-05") == {"e1", "e2"}

    svc.update(day=date(2024, 3, 5), employee_ids=[])

    assert "2024-03-05" not in store.schedule
    assert svc.get_for_date(date(2024, 3, 5)) == frozenset()


def test_unknown_employee_rejected(container):
    with pytest.raises(ValidationError):
        container.schedule_service.update(day=date(2024, 3, 5), employee_ids=["nobody"])


def test_deleting_employee_drops_schedule_entries(container, store):
    container.schedule_service.update(day=date(2024, 3, 5), employee_ids=["e1"])

    container.employee_service.delete("e1")

    assert store.schedule == {}
