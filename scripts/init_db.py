from __future__ import annotations

import importlib

from timeclock_kiosk.config import get_settings_module
from timeclock_kiosk.database.bootstrap import apply_schema, list_tables
from timeclock_kiosk.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    apply_schema(conn)
    tables = list_tables(conn)
    print(f"OK: Applied schema.sql -> {conn.config.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
