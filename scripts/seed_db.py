from __future__ import annotations

import importlib

from timeclock_kiosk.config import get_settings_module
from timeclock_kiosk.database.bootstrap import ensure_default_employees
from timeclock_kiosk.database.connection import DatabaseConnection, DBConfig
from timeclock_kiosk.employees.mysql_employee_repository import MySQLEmployeeRepository


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    added = ensure_default_employees(MySQLEmployeeRepository(conn))
    print(f"OK: Seeded database -> {conn.config.describe()} (employees added={added})")


if __name__ == "__main__":
    main()
