"""Constants and defaults."""

DATE_KEY_FORMAT = "%Y-%m-%d"
MONTH_KEY_FORMAT = "%Y-%m"

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000

DEFAULT_ADMIN_PASSWORD = "admin123"
ADMIN_SETTINGS_KEY = "admin"

IMPORT_NAME_COLUMN = "Name"
IMPORT_RATE_COLUMN = "Rate"

# Column limits of the employees table.
EMPLOYEE_NAME_MAX_LENGTH = 150
RATE_MAX = 10_000_000_000
RATE_DECIMALS = 2

EXPORT_FILENAME_TEMPLATE = "payroll_report_{start}_{end}.xlsx"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Seeded on first start when the employee table is empty.
DEFAULT_EMPLOYEES = (
    ("Ivan Petrov (Test)", 350.0),
    ("Maria Sidorova (Test)", 400.0),
    ("Alexey Smirnov (Test)", 375.0),
)
