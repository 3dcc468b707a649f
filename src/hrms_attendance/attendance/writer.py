from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from ..core.enums import DuplicatePolicy
from ..core.exceptions import ConcurrencyError
from ..employees.model import Employee
from ..payroll.model import Salary
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceWriter:
    """Persists one imported day: the salary and the attendance record together.

    With ``DuplicatePolicy.APPEND`` every import adds a record; with ``UPSERT`` the
    latest record of the same (employee, date) is replaced.
    """

    def __init__(self, attendance: AttendanceRepository, *, policy: DuplicatePolicy = DuplicatePolicy.APPEND):
        self._attendance = attendance
        self._policy = DuplicatePolicy(policy)

    def existing_for(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        if self._policy == DuplicatePolicy.APPEND:
            return None
        return self._attendance.get_latest_for_employee_and_date(employee_id, work_date)

    def write(
        self,
        employee: Employee,
        salary: Salary,
        record: AttendanceRecord,
        *,
        replaces: Optional[AttendanceRecord] = None,
    ) -> AttendanceRecord:
        record_id = self._attendance.save_day(
            employee_id=employee.employee_id,
            salary=salary,
            expected_version=employee.version,
            record=record,
            replace_record_id=replaces.record_id if replaces is not None else None,
        )
        if record_id is None:
            raise ConcurrencyError(f"Employee {employee.employee_code!r} was modified concurrently")
        return replace(record, record_id=record_id)
