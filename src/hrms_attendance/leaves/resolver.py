from __future__ import annotations

from datetime import date
from typing import Optional

from .model import LeaveApplication
from .repository import LeaveLookup


class LeaveConflictResolver:
    """Finds the approved leave covering a date; at most one is expected."""

    def __init__(self, leaves: LeaveLookup):
        self._leaves = leaves

    def resolve(self, *, employee_id: int, on_date: date) -> Optional[LeaveApplication]:
        found = self._leaves.find_approved_covering(employee_id=employee_id, on_date=on_date)
        return found[0] if found else None
