from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of a stored attendance record."""

    CLOCKED_IN = "clocked-in"
    CLOCKED_OUT = "clocked-out"


class ClockAction(str, Enum):
    CLOCK_IN = "clock-in"
    CLOCK_OUT = "clock-out"


class KioskState(str, Enum):
    """Display state of an employee tile on the kiosk screen."""

    IDLE = "idle"
    ACTIVE = "active"
    SCHEDULED = "scheduled"
