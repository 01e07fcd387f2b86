"""Timeclock kiosk package.

Organized by feature modules (employees, attendance, schedules, payroll, kiosk)
with a thin Flask controller layer over service/repository layers. The
aggregation, schedule index and kiosk presenter are pure functions over
in-memory snapshots.
"""
