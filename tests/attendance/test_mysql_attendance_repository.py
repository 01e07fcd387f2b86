from datetime import datetime

import mysql.connector
import pytest
from mysql.connector import errorcode

from helpers import PHOTO
from timeclock_kiosk.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from timeclock_kiosk.core.exceptions import ClockActionRejected


class FailingCursor:
    def __init__(self, error):
        self._error = error

    def execute(self, *args, **kwargs):
        raise self._error

    def close(self):
        pass


class FailingConnection:
    def __init__(self, error):
        self._error = error
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return FailingCursor(self._error)

    def commit(self):
        pass

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, error):
        self.conn = FailingConnection(error)

    def connect(self, *, with_database=True):
        return self.conn


def _clock_in(repo):
    return repo.create_clock_in(
        employee_id="e1",
        employee_name="Anna Ivanova",
        clock_in_time=datetime(2024, 3, 5, 9, 0),
        clock_in_photo=PHOTO,
    )


def test_duplicate_open_shift_is_rejected():
    factory = FakeConnFactory(mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY))

    with pytest.raises(ClockActionRejected):
        _clock_in(MySQLAttendanceRepository(factory))
    assert factory.conn.rolled_back


def test_other_integrity_errors_propagate():
    error = mysql.connector.IntegrityError(msg="Cannot add a child row", errno=errorcode.ER_NO_REFERENCED_ROW_2)

    with pytest.raises(mysql.connector.IntegrityError):
        _clock_in(MySQLAttendanceRepository(FakeConnFactory(error)))
