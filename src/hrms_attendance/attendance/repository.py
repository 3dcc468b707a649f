from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..payroll.model import Salary
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def save_day(
        self,
        *,
        employee_id: int,
        salary: Salary,
        expected_version: int,
        record: AttendanceRecord,
        replace_record_id: Optional[int] = None,
    ) -> Optional[int]:
        """Persist the employee's salary and the day's record in one transaction.

        The salary is written only if the stored employee version still equals
        ``expected_version``; otherwise nothing is written and None is returned.
        Returns the record id (the replaced one when ``replace_record_id`` is given).
        """

        raise NotImplementedError

    def get_latest_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_page(self, *, employee_id: int, offset: int, limit: int) -> Sequence[AttendanceRecord]:
        """Records in stored (append) order."""

        raise NotImplementedError

    def count_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
