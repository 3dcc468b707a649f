from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one imported attendance day of an employee.

    ``entry_exit_time`` is flat: entry, exit, entry, exit, ...
    ``deduction`` is what this day took off the salary; replacing the record
    gives exactly that amount back.
    """

    employee_id: int
    work_date: date
    status: AttendanceStatus
    day_salary: Decimal
    deduction: Decimal = Decimal("0.00")
    entry_exit_time: tuple[datetime, ...] = ()
    record_id: Optional[int] = None

    def __post_init__(self):
        if len(self.entry_exit_time) % 2:
            raise ValueError("entry_exit_time must hold entry/exit pairs")

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "daySalary": str(self.day_salary),
            "deduction": str(self.deduction),
            "entryExitTime": [t.isoformat() for t in self.entry_exit_time],
        }


@dataclass(frozen=True)
class AttendancePage:
    attendance: list[AttendanceRecord]
    total: int
