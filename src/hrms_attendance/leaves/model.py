from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveApplication:
    leave_id: int
    employee_id: int
    leave_type: LeaveType
    from_date: date
    to_date: date
    reason: str
    status: LeaveStatus
    created_at: datetime
    decided_by: Optional[int] = None
    decided_at: Optional[datetime] = None

    def covers(self, on_date: date) -> bool:
        return self.from_date <= on_date <= self.to_date

    @property
    def is_paid(self) -> bool:
        # Only sick leave keeps the day's salary.
        return self.leave_type == LeaveType.SICK

    def to_dict(self) -> dict:
        return {
            "id": self.leave_id,
            "employee": self.employee_id,
            "leaveType": self.leave_type.value,
            "fromDate": self.from_date.isoformat(),
            "toDate": self.to_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class LeavePage:
    applications: list[LeaveApplication]
    total: int
