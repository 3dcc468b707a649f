from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.service import AuthService
from .attendance.import_service import AttendanceImportService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .attendance.writer import AttendanceWriter
from .core.constants import DEFAULT_MAX_SAVE_RETRIES, DEFAULT_PUNCH_COLUMN_OFFSET
from .core.enums import DuplicatePolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.resolver import DirectoryResolver
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.notifications import MySQLNotificationRepository
from .leaves.resolver import LeaveConflictResolver
from .leaves.service import LeaveService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    attendance_service: AttendanceService
    import_service: AttendanceImportService
    leave_service: LeaveService


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    accounts_repo = MySQLAccountRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    notifications_repo = MySQLNotificationRepository(conn)

    writer = AttendanceWriter(
        attendance_repo,
        policy=DuplicatePolicy(getattr(settings, "DUPLICATE_POLICY", DuplicatePolicy.APPEND.value)),
    )
    import_service = AttendanceImportService(
        DirectoryResolver(employees_repo),
        LeaveConflictResolver(leaves_repo),
        writer,
        punch_offset=int(getattr(settings, "PUNCH_COLUMN_OFFSET", DEFAULT_PUNCH_COLUMN_OFFSET)),
        max_save_retries=int(getattr(settings, "MAX_SAVE_RETRIES", DEFAULT_MAX_SAVE_RETRIES)),
    )

    return Container(
        auth_service=AuthService(accounts_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        import_service=import_service,
        leave_service=LeaveService(leaves_repo, employees_repo, notifier=notifications_repo),
    )
