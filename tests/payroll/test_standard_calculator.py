from datetime import datetime

import pytest

from helpers import shift
from timeclock_kiosk.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_shift_hours_are_fractional_and_unrounded():
    record = shift("a1", "e1", datetime(2024, 3, 5, 9, 0), datetime(2024, 3, 5, 9, 20))

    calc = StandardPayrollCalculator()
    assert calc.shift_hours(record) == pytest.approx(1 / 3)
    assert calc.pay(1 / 3, 300) == pytest.approx(100)


def test_open_shift_has_no_hours():
    calc = StandardPayrollCalculator()
    assert calc.shift_hours(shift("a1", "e1", datetime(2024, 3, 5, 9, 0))) == 0.0
