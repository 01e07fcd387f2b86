"""Example: drive the service layer without Flask.

Builds the in-memory demo store, clocks one employee out and prints today's
kiosk tiles and payroll report.
"""

from datetime import datetime

from timeclock_kiosk.container import build_memory_container
from timeclock_kiosk.database.demo import PLACEHOLDER_PHOTO, seed_demo
from timeclock_kiosk.database.memory_store import MemoryStore


def main():
    now = datetime.now()
    container = build_memory_container(seed_demo(MemoryStore(id_prefix="demo"), now=now))

    container.clock_service.clock_out("demo1", PLACEHOLDER_PHOTO, now=now)

    for tile in container.kiosk_service.tiles(now=now):
        print(tile.to_dict(now))

    for row in container.payroll_report_service.build_report(start=now.date(), end=now.date()):
        print(row.employee.name, round(row.total_hours, 2), round(row.total_pay, 2))


if __name__ == "__main__":
    main()
