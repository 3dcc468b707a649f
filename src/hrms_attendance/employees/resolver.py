from __future__ import annotations

from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeDirectory


class DirectoryResolver:
    def __init__(self, employees: EmployeeDirectory):
        self._employees = employees

    def resolve(self, employee_code: str) -> Employee:
        code = (employee_code or "").strip()
        employee = self._employees.get_by_code(code) if code else None
        if not employee:
            raise NotFoundError(f"Employee {code!r} not found")
        return employee
