from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .admin.mysql_settings_repository import MySQLSettingsRepository
from .admin.repository import SettingsRepository
from .admin.service import AdminAuthService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import ClockService
from .core.constants import DEFAULT_ADMIN_PASSWORD
from .database.connection import DBConfig, DatabaseConnection
from .database.memory_store import (
    InMemoryAttendanceRepository,
    InMemoryEmployeeRepository,
    InMemoryScheduleRepository,
    InMemorySettingsRepository,
    MemoryStore,
)
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .kiosk.service import KioskService
from .payroll.service import PayrollReportService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    schedules_repo: ScheduleRepository
    settings_repo: SettingsRepository

    employee_service: EmployeeService
    clock_service: ClockService
    schedule_service: ScheduleService
    kiosk_service: KioskService
    payroll_report_service: PayrollReportService
    admin_auth_service: AdminAuthService

    demo_mode: bool = False
    conn: Optional[Any] = None


def _wire(
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    schedules_repo: ScheduleRepository,
    settings_repo: SettingsRepository,
    *,
    default_admin_password: str,
    demo_mode: bool,
    conn: Optional[Any] = None,
) -> Container:
    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        schedules_repo=schedules_repo,
        settings_repo=settings_repo,
        employee_service=EmployeeService(employees_repo),
        clock_service=ClockService(attendance_repo, employees_repo),
        schedule_service=ScheduleService(schedules_repo, employees_repo),
        kiosk_service=KioskService(employees_repo, attendance_repo, schedules_repo),
        payroll_report_service=PayrollReportService(employees_repo, attendance_repo),
        admin_auth_service=AdminAuthService(settings_repo, default_password=default_admin_password),
        demo_mode=demo_mode,
        conn=conn,
    )


def build_container(*, db_config: dict, default_admin_password: str = DEFAULT_ADMIN_PASSWORD) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return _wire(
        MySQLEmployeeRepository(conn),
        MySQLAttendanceRepository(conn),
        MySQLScheduleRepository(conn),
        MySQLSettingsRepository(conn),
        default_admin_password=default_admin_password,
        demo_mode=False,
        conn=conn,
    )


def build_memory_container(
    store: Optional[MemoryStore] = None,
    *,
    default_admin_password: str = DEFAULT_ADMIN_PASSWORD,
    demo_mode: bool = True,
) -> Container:
    store = store or MemoryStore()
    return _wire(
        InMemoryEmployeeRepository(store),
        InMemoryAttendanceRepository(store),
        InMemoryScheduleRepository(store),
        InMemorySettingsRepository(store),
        default_admin_password=default_admin_password,
        demo_mode=demo_mode,
        conn=store,
    )
