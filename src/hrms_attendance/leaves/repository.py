from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveApplication


class LeaveLookup(Protocol):
    """Read-only capability used by the import pipeline."""

    def find_approved_covering(self, *, employee_id: int, on_date: date) -> Sequence[LeaveApplication]:
        raise NotImplementedError


class LeaveRepository(LeaveLookup, Protocol):
    def create(
        self,
        *,
        employee_id: int,
        leave_type: LeaveType,
        from_date: date,
        to_date: date,
        reason: str,
        status: LeaveStatus,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, leave_id: int) -> Optional[LeaveApplication]:
        raise NotImplementedError

    def decide(self, *, leave_id: int, status: LeaveStatus, decided_by: int) -> bool:
        """Move a Pending application to ``status``; False if it is no longer Pending."""

        raise NotImplementedError

    def list_page(self, *, employee_id: Optional[int], offset: int, limit: int) -> Sequence[LeaveApplication]:
        raise NotImplementedError

    def count(self, *, employee_id: Optional[int]) -> int:
        raise NotImplementedError
