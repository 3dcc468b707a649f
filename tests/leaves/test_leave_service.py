from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from hrms_attendance.accounts.model import SessionAccount
from hrms_attendance.core.enums import LeaveStatus, LeaveType, Role
from hrms_attendance.core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from hrms_attendance.leaves.model import LeaveApplication
from hrms_attendance.leaves.service import LeaveService

ADMIN = SessionAccount(account_id=1, role=Role.ADMIN, employee_id=None)
ANN = SessionAccount(account_id=2, role=Role.EMPLOYEE, employee_id=1)


class FakeLeaveRepo:
    def __init__(self):
        self._next_id = 1
        self.items: dict[int, LeaveApplication] = {}

    def create(self, *, employee_id, leave_type, from_date, to_date, reason, status):
        leave_id = self._next_id
        self._next_id += 1
        self.items[leave_id] = LeaveApplication(
            leave_id=leave_id,
            employee_id=employee_id,
            leave_type=leave_type,
            from_date=from_date,
            to_date=to_date,
            reason=reason,
            status=status,
            created_at=datetime(2025, 1, 10, 9, leave_id),
        )
        return leave_id

    def get_by_id(self, leave_id):
        return self.items.get(int(leave_id))

    def decide(self, *, leave_id, status, decided_by):
        leave = self.items.get(int(leave_id))
        if not leave or leave.status != LeaveStatus.PENDING:
            return False
        self.items[leave_id] = replace(leave, status=status, decided_by=decided_by)
        return True

    def find_approved_covering(self, *, employee_id, on_date):
        return []

    def list_page(self, *, employee_id, offset, limit):
        rows = [l for l in self.items.values() if employee_id is None or l.employee_id == employee_id]
        rows.sort(key=lambda l: l.created_at, reverse=True)
        return rows[offset : offset + limit]

    def count(self, *, employee_id):
        return len([l for l in self.items.values() if employee_id is None or l.employee_id == employee_id])


class FakeEmployees:
    def get_by_id(self, employee_id):
        return object() if int(employee_id) in (1, 2) else None


class FakeNotifier:
    def __init__(self):
        self.sent = []

    def notify(self, *, employee_id, message, payload):
        self.sent.append((employee_id, message, payload))


def _service():
    repo = FakeLeaveRepo()
    notifier = FakeNotifier()
    return LeaveService(repo, FakeEmployees(), notifier=notifier), repo, notifier


def _submit(service, actor, employee_id=1, **overrides):
    data = dict(leave_type="Sick Leave", from_date="14/01/2025", to_date="16/01/2025", reason="flu")
    data.update(overrides)
    return service.submit(actor=actor, employee_id=employee_id, **data)


def test_employee_application_starts_pending():
    service, repo, _ = _service()

    leave_id = _submit(service, ANN)

    leave = repo.items[leave_id]
    assert leave.status == LeaveStatus.PENDING
    assert leave.leave_type == LeaveType.SICK
    assert (leave.from_date, leave.to_date) == (date(2025, 1, 14), date(2025, 1, 16))


def test_admin_application_is_approved_immediately():
    service, repo, _ = _service()

    leave_id = _submit(service, ADMIN, employee_id=2)

    assert repo.items[leave_id].status == LeaveStatus.APPROVED


def test_employee_cannot_file_for_someone_else():
    service, _, _ = _service()

    with pytest.raises(AuthorizationError):
        _submit(service, ANN, employee_id=2)


@pytest.mark.parametrize(
    "overrides",
    [
        {"leave_type": "Vacation"},
        {"from_date": "2025-01-14"},
        {"from_date": "16/01/2025", "to_date": "14/01/2025"},
        {"reason": "   "},
    ],
)
def test_invalid_applications_are_rejected(overrides):
    service, _, _ = _service()

    with pytest.raises(ValidationError):
        _submit(service, ANN, **overrides)


def test_unknown_employee():
    service, _, _ = _service()

    with pytest.raises(NotFoundError):
        _submit(service, ADMIN, employee_id=99)


def test_approve_notifies_employee():
    service, repo, notifier = _service()
    leave_id = _submit(service, ANN)

    service.approve(actor=ADMIN, leave_id=str(leave_id))

    assert repo.items[leave_id].status == LeaveStatus.APPROVED
    assert repo.items[leave_id].decided_by == ADMIN.account_id
    assert notifier.sent == [
        (1, "Your application has been approved.", {"application": leave_id, "employee": 1})
    ]


def test_reject_then_approve_conflicts():
    service, repo, _ = _service()
    leave_id = _submit(service, ANN)

    service.reject(actor=ADMIN, leave_id=leave_id)

    assert repo.items[leave_id].status == LeaveStatus.REJECTED
    with pytest.raises(ConflictError):
        service.approve(actor=ADMIN, leave_id=leave_id)


def test_only_admin_decides():
    service, _, _ = _service()
    leave_id = _submit(service, ANN)

    with pytest.raises(AuthorizationError):
        service.approve(actor=ANN, leave_id=leave_id)


def test_deciding_unknown_application():
    service, _, _ = _service()

    with pytest.raises(NotFoundError):
        service.reject(actor=ADMIN, leave_id=42)


def test_listing_is_scoped_to_employee():
    service, _, _ = _service()
    _submit(service, ANN)
    _submit(service, ADMIN, employee_id=2)

    mine = service.list_applications(actor=ANN, page=0, rows_per_page=10)
    everything = service.list_applications(actor=ADMIN, page=0, rows_per_page=10)

    assert [l.employee_id for l in mine.applications] == [1]
    assert mine.total == 1
    assert everything.total == 2
    assert [l.leave_id for l in everything.applications] == [2, 1]


def test_listing_rejects_bad_paging():
    service, _, _ = _service()

    with pytest.raises(ValidationError):
        service.list_applications(actor=ADMIN, page=-1, rows_per_page=10)
