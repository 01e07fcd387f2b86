from datetime import date, datetime, timedelta, timezone

from timeclock_kiosk.schedules.index import from_rows, get_scheduled, is_scheduled, set_scheduled


def test_set_then_clear_removes_date_key():
    schedule = set_scheduled({}, "2024-03-05", {"e1", "e2"})
    assert get_scheduled(schedule, date(2024, 3, 5)) == {"e1", "e2"}

    cleared = set_scheduled(schedule, "2024-03-05", set())

    assert "2024-03-05" not in cleared
    assert get_scheduled(cleared, "2024-03-05") == frozenset()


def test_set_does_not_mutate_input():
    original = {"2024-03-05": frozenset({"e1"})}

    updated = set_scheduled(original, "2024-03-05", ["e2"])

    assert original == {"2024-03-05": frozenset({"e1"})}
    assert updated["2024-03-05"] == {"e2"}


def test_set_is_idempotent():
    once = set_scheduled({}, "2024-03-05", ["e1"])
    assert set_scheduled(once, "2024-03-05", ["e1"]) == once


def test_missing_date_is_empty():
    assert get_scheduled({}, "2024-03-05") == frozenset()
    assert get_scheduled(None, "2024-03-05") == frozenset()


def test_datetime_keys_use_local_calendar_date():
    late_evening = datetime(2024, 3, 5, 23, 30)
    schedule = set_scheduled({}, late_evening, ["e1"])

    assert list(schedule) == ["2024-03-05"]
    assert is_scheduled(schedule, datetime(2024, 3, 5, 0, 5), "e1")


def test_aware_datetime_converted_to_local_before_keying():
    local = datetime(2024, 3, 5, 23, 30).astimezone()
    as_utc = local.astimezone(timezone.utc)

    schedule = set_scheduled({}, as_utc, ["e1"])

    assert list(schedule) == ["2024-03-05"]
    assert not is_scheduled(schedule, local + timedelta(days=1), "e1")


def test_from_rows_groups_by_date():
    schedule = from_rows([("2024-03-05", "e1"), ("2024-03-05", "e2"), ("2024-03-06", "e1")])

    assert schedule == {"2024-03-05": {"e1", "e2"}, "2024-03-06": {"e1"}}
