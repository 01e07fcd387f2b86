from datetime import date, datetime

from helpers import PHOTO
from timeclock_kiosk.core.enums import KioskState


def test_tiles_cover_every_employee(container, fixed_now):
    container.schedule_service.update(day=fixed_now, employee_ids=["e2"])
    container.clock_service.clock_in("e1", PHOTO, now=datetime(2024, 3, 5, 8, 0))

    tiles = {t.employee.id: t for t in container.kiosk_service.tiles(now=fixed_now)}

    assert tiles["e1"].state == KioskState.ACTIVE
    assert tiles["e1"].minutes_worked_today == 120
    assert tiles["e2"].state == KioskState.SCHEDULED


def test_calendar_month_lists_scheduled_and_attended_first_names(container):
    container.schedule_service.update(day=date(2024, 3, 5), employee_ids=["e1", "e2"])
    container.clock_service.clock_in("e1", PHOTO, now=datetime(2024, 3, 5, 9, 0))

    days = container.kiosk_service.calendar_month(date(2024, 3, 1))

    assert len(days) == 31
    march_5 = days[4].to_dict()
    assert march_5["date"] == "2024-03-05"
    assert march_5["names"] == [
        {"name": "Anna", "attended": True},
        {"name": "Boris", "attended": False},
    ]
    assert days[5].to_dict()["names"] == []
