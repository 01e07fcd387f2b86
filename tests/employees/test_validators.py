import pytest

from timeclock_kiosk.common.validators import parse_rate, require_non_empty, require_photo
from timeclock_kiosk.core.exceptions import ValidationError


@pytest.mark.parametrize("value, expected", [("350", 350.0), (" 412,5 ", 412.5), (0, 0.0), (99.9, 99.9)])
def test_parse_rate_accepts_numbers(value, expected):
    assert parse_rate(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "abc", "-1", -5, "nan", "inf", True, "410.555", 1e10])
def test_parse_rate_rejects_bad_input(value):
    with pytest.raises(ValidationError):
        parse_rate(value)


def test_require_non_empty_strips():
    assert require_non_empty("  Anna ", "Name") == "Anna"
    with pytest.raises(ValidationError):
        require_non_empty(" ", "Name")


def test_require_photo():
    assert require_photo("data:image/png;base64,AA") == "data:image/png;base64,AA"
    with pytest.raises(ValidationError):
        require_photo("https://example.com/a.png")


def test_require_non_empty_max_length():
    assert require_non_empty("a" * 150, "Name", max_length=150) == "a" * 150
    with pytest.raises(ValidationError):
        require_non_empty("a" * 151, "Name", max_length=150)
