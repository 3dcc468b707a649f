from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeDirectory(Protocol):
    """Read-only lookup used by the import pipeline."""

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        raise NotImplementedError


class EmployeeRepository(EmployeeDirectory, Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError
