from __future__ import annotations

from ..accounts.model import SessionAccount
from ..common.validators import require_page, require_positive_int
from ..core.exceptions import AuthorizationError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import AttendancePage
from .repository import AttendanceRepository


class AttendanceService:
    """Read side of attendance: paged history of one employee, oldest first."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def get_page(self, *, actor: SessionAccount, employee_id, page, rows_per_page) -> AttendancePage:
        employee_id = require_positive_int(employee_id, "employee id")
        offset, limit = require_page(page, rows_per_page)

        if not actor.can_access_employee(employee_id):
            raise AuthorizationError("Access Denied")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        items = self._attendance.list_page(employee_id=employee_id, offset=offset, limit=limit)
        return AttendancePage(attendance=list(items), total=self._attendance.count_for_employee(employee_id))
