from __future__ import annotations

import logging
from typing import Optional

from ..accounts.model import SessionAccount
from ..common.datetime_utils import parse_date
from ..common.validators import require_non_empty, require_page, require_positive_int
from ..core.constants import LEAVE_DATE_FORMAT
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeavePage
from .notifications import Notifier
from .repository import LeaveRepository

log = logging.getLogger(__name__)


class LeaveService:
    """Leave applications: submit, approve/reject, list.

    Applications filed by an admin are approved on creation; employees can only
    file for themselves and start Pending.
    """

    def __init__(self, leaves: LeaveRepository, employees: EmployeeRepository, notifier: Optional[Notifier] = None):
        self._leaves = leaves
        self._employees = employees
        self._notifier = notifier

    @staticmethod
    def _parse_leave_type(value: str) -> LeaveType:
        try:
            return LeaveType((value or "").strip())
        except ValueError:
            raise ValidationError("Leave type can only be Sick Leave, Personal Leave or Others")

    def submit(
        self,
        *,
        actor: SessionAccount,
        employee_id,
        leave_type: str,
        from_date: str,
        to_date: str,
        reason: str,
    ) -> int:
        employee_id = require_positive_int(employee_id, "employee id")
        kind = self._parse_leave_type(leave_type)
        start = parse_date(from_date, LEAVE_DATE_FORMAT)
        end = parse_date(to_date, LEAVE_DATE_FORMAT)
        if end < start:
            raise ValidationError("Last date of leave must not be before the first")
        reason = require_non_empty(reason, "Reason for leave")

        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        if not actor.can_access_employee(employee_id):
            raise AuthorizationError("Access Denied")

        status = LeaveStatus.APPROVED if actor.is_admin else LeaveStatus.PENDING
        leave_id = self._leaves.create(
            employee_id=employee_id,
            leave_type=kind,
            from_date=start,
            to_date=end,
            reason=reason,
            status=status,
        )
        log.info("leave %s filed for employee %s (%s, %s)", leave_id, employee_id, kind.value, status.value)
        return leave_id

    def approve(self, *, actor: SessionAccount, leave_id) -> None:
        self._decide(actor=actor, leave_id=leave_id, status=LeaveStatus.APPROVED)

    def reject(self, *, actor: SessionAccount, leave_id) -> None:
        self._decide(actor=actor, leave_id=leave_id, status=LeaveStatus.REJECTED)

    def _decide(self, *, actor: SessionAccount, leave_id, status: LeaveStatus) -> None:
        leave_id = require_positive_int(leave_id, "application id")
        if not actor.is_admin:
            raise AuthorizationError("Access Denied")

        leave = self._leaves.get_by_id(leave_id)
        if not leave:
            raise NotFoundError("This application doesn't exist")
        if leave.status != LeaveStatus.PENDING:
            raise ConflictError("Application is already accepted or rejected")

        if not self._leaves.decide(leave_id=leave_id, status=status, decided_by=actor.account_id):
            raise ConflictError("Application is already accepted or rejected")

        if self._notifier:
            verb = "approved" if status == LeaveStatus.APPROVED else "rejected"
            self._notifier.notify(
                employee_id=leave.employee_id,
                message=f"Your application has been {verb}.",
                payload={"application": leave.leave_id, "employee": leave.employee_id},
            )

    def list_applications(self, *, actor: SessionAccount, page, rows_per_page) -> LeavePage:
        offset, limit = require_page(page, rows_per_page)
        if actor.is_admin:
            scope = None
        elif actor.employee_id is not None:
            scope = int(actor.employee_id)
        else:
            raise AuthorizationError("Access Denied")

        items = self._leaves.list_page(employee_id=scope, offset=offset, limit=limit)
        return LeavePage(applications=list(items), total=self._leaves.count(employee_id=scope))
