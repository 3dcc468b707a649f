from __future__ import annotations

import io
from dataclasses import replace
from datetime import datetime, time
from decimal import Decimal

import pytest
from werkzeug.security import generate_password_hash

from hrms_attendance.accounts.model import Account
from hrms_attendance.accounts.service import AuthService
from hrms_attendance.attendance.import_service import AttendanceImportService
from hrms_attendance.attendance.service import AttendanceService
from hrms_attendance.attendance.writer import AttendanceWriter
from hrms_attendance.container import Container
from hrms_attendance.core.enums import LeaveStatus, Role
from hrms_attendance.employees.department_model import Department
from hrms_attendance.employees.model import Employee
from hrms_attendance.employees.resolver import DirectoryResolver
from hrms_attendance.leaves.model import LeaveApplication
from hrms_attendance.leaves.resolver import LeaveConflictResolver
from hrms_attendance.leaves.service import LeaveService
from hrms_attendance.main import create_app
from hrms_attendance.payroll.model import Salary

CSV = (
    "Employee ID,Name,Date,Times,Department,In1,Out1\n"
    "E001,Ann,2025-01-15,2,Eng,09:00:00,18:00:00\n"
    "E001,Ann,2025-01-16,0,Eng,,\n"
    "E404,Nobody,2025-01-16,0,Eng,,\n"
).encode("utf-8")


class FakeAccounts:
    def __init__(self):
        self._by_name = {
            "admin": Account(1, "admin", generate_password_hash("admin123"), Role.ADMIN, None),
            "e001": Account(2, "e001", generate_password_hash("employee123"), Role.EMPLOYEE, 1),
        }

    def get_by_username(self, username):
        return self._by_name.get(username)


class FakeEmployees:
    def __init__(self):
        dept = Department(dept_id=1, dept_name="Engineering", open_time=time(9, 0), close_time=time(18, 0))
        self._by_id = {
            1: Employee(
                employee_id=1,
                employee_code="E001",
                full_name="Ann Lee",
                department=dept,
                salary=Salary(Decimal("31000.00"), Decimal("0.00"), Decimal("31000.00")),
            ),
            2: Employee(
                employee_id=2,
                employee_code="E002",
                full_name="Bo Tran",
                department=dept,
                salary=Salary(Decimal("31000.00"), Decimal("0.00"), Decimal("31000.00")),
            ),
        }

    def get_by_code(self, employee_code):
        return next((e for e in self._by_id.values() if e.employee_code == employee_code), None)

    def get_by_id(self, employee_id):
        return self._by_id.get(int(employee_id))


class FakeAttendance:
    def __init__(self, employees: FakeEmployees):
        self._employees = employees
        self.records = []

    def save_day(self, *, employee_id, salary, expected_version, record, replace_record_id=None):
        current = self._employees._by_id[employee_id]
        if current.version != expected_version:
            return None
        self.records.append(replace(record, record_id=len(self.records) + 1))
        self._employees._by_id[employee_id] = replace(current, salary=salary, version=current.version + 1)
        return len(self.records)

    def get_latest_for_employee_and_date(self, employee_id, work_date):
        return None

    def list_page(self, *, employee_id, offset, limit):
        return [r for r in self.records if r.employee_id == employee_id][offset : offset + limit]

    def count_for_employee(self, employee_id):
        return len([r for r in self.records if r.employee_id == employee_id])


class FakeLeaves:
    def __init__(self):
        self.items = {}

    def create(self, *, employee_id, leave_type, from_date, to_date, reason, status):
        leave_id = len(self.items) + 1
        self.items[leave_id] = LeaveApplication(
            leave_id=leave_id,
            employee_id=employee_id,
            leave_type=leave_type,
            from_date=from_date,
            to_date=to_date,
            reason=reason,
            status=status,
            created_at=datetime(2025, 1, 10, 9, 0),
        )
        return leave_id

    def get_by_id(self, leave_id):
        return self.items.get(int(leave_id))

    def decide(self, *, leave_id, status, decided_by):
        leave = self.items[leave_id]
        if leave.status != LeaveStatus.PENDING:
            return False
        self.items[leave_id] = replace(leave, status=status, decided_by=decided_by)
        return True

    def find_approved_covering(self, *, employee_id, on_date):
        return [
            l
            for l in self.items.values()
            if l.employee_id == employee_id and l.status == LeaveStatus.APPROVED and l.covers(on_date)
        ]

    def list_page(self, *, employee_id, offset, limit):
        rows = [l for l in self.items.values() if employee_id is None or l.employee_id == employee_id]
        return rows[offset : offset + limit]

    def count(self, *, employee_id):
        return len([l for l in self.items.values() if employee_id is None or l.employee_id == employee_id])


class FakeNotifier:
    def __init__(self):
        self.sent = []

    def notify(self, *, employee_id, message, payload):
        self.sent.append((employee_id, message))


@pytest.fixture()
def stores():
    employees = FakeEmployees()
    return {
        "employees": employees,
        "attendance": FakeAttendance(employees),
        "leaves": FakeLeaves(),
        "notifier": FakeNotifier(),
    }


@pytest.fixture()
def client(monkeypatch, stores):
    monkeypatch.setenv("APP_ENV", "testing")
    employees = stores["employees"]
    attendance = stores["attendance"]
    leaves = stores["leaves"]
    container = Container(
        auth_service=AuthService(FakeAccounts()),
        attendance_service=AttendanceService(attendance, employees),
        import_service=AttendanceImportService(
            DirectoryResolver(employees),
            LeaveConflictResolver(leaves),
            AttendanceWriter(attendance),
            clock=lambda: datetime(2025, 1, 20, 10, 0),
        ),
        leave_service=LeaveService(leaves, employees, notifier=stores["notifier"]),
    )
    app = create_app(container=container)
    return app.test_client()


def _sign_in(client, *, account_id, role, employee_id):
    with client.session_transaction() as sess:
        sess["account_id"] = account_id
        sess["role"] = role
        sess["employee_id"] = employee_id


def _as_admin(client):
    _sign_in(client, account_id=1, role="admin", employee_id=None)


def _as_ann(client):
    _sign_in(client, account_id=2, role="employee", employee_id=1)


def _upload(client, payload=CSV):
    return client.post(
        "/api/attendance/upload",
        data={"attendance": (io.BytesIO(payload), "attendance.csv")},
        content_type="multipart/form-data",
    )


def test_login_sets_session(client):
    resp = client.post("/api/login", json={"username": "e001", "password": "employee123"})

    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"role": "employee", "employee": 1}
    with client.session_transaction() as sess:
        assert sess["account_id"] == 2
        assert sess["employee_id"] == 1


def test_login_with_wrong_password(client):
    resp = client.post("/api/login", json={"username": "e001", "password": "nope"})

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_logout_clears_session(client):
    _as_ann(client)

    client.post("/api/logout")

    assert client.get("/api/attendance/1/0/10").status_code == 401


def test_upload_requires_admin(client):
    assert _upload(client).status_code == 401
    _as_ann(client)
    assert _upload(client).status_code == 403


def test_upload_returns_message_and_report(client, stores):
    _as_admin(client)

    resp = _upload(client)

    assert resp.status_code == 200
    body = resp.get_json()["data"]
    assert body["message"] == "Attendance Uploaded"
    assert body["report"]["processed"] == 2
    assert body["report"]["skipped"] == [{"row": 3, "employeeId": "E404"}]
    assert len(stores["attendance"].records) == 2
    assert stores["employees"].get_by_id(1).salary.final_amount == Decimal("30000.00")


def test_upload_without_file(client):
    _as_admin(client)

    resp = client.post("/api/attendance/upload", data={}, content_type="multipart/form-data")

    assert resp.status_code == 400


def test_upload_unreadable_file(client):
    _as_admin(client)

    resp = _upload(client, payload=b"\xff\xfe\xfa\x00garbage")

    assert resp.status_code == 500
    assert resp.get_json()["error"]["code"] == "IMPORT_FILE_ERROR"


def test_attendance_page_for_self(client):
    _as_admin(client)
    _upload(client)
    _as_ann(client)

    resp = client.get("/api/attendance/1/0/1")

    assert resp.status_code == 200
    body = resp.get_json()["data"]
    assert body["total"] == 2
    assert body["attendance"] == [
        {
            "id": 1,
            "date": "2025-01-15",
            "status": "Present",
            "daySalary": "1000.00",
            "deduction": "0.00",
            "entryExitTime": ["2025-01-15T09:00:00", "2025-01-15T18:00:00"],
        }
    ]


def test_attendance_page_errors(client):
    _as_ann(client)
    assert client.get("/api/attendance/2/0/10").status_code == 403
    assert client.get("/api/attendance/abc/0/10").status_code == 422

    _as_admin(client)
    assert client.get("/api/attendance/99/0/10").status_code == 404


def test_leave_workflow(client, stores):
    _as_ann(client)
    resp = client.post(
        "/api/leaves",
        json={"leaveType": "Sick Leave", "fromDate": "14/01/2025", "toDate": "16/01/2025", "reason": "flu"},
    )
    assert resp.status_code == 202
    leave_id = resp.get_json()["data"]["id"]
    assert client.patch(f"/api/leaves/{leave_id}/approve").status_code == 403

    _as_admin(client)
    assert client.patch(f"/api/leaves/{leave_id}/approve").status_code == 200
    assert client.patch(f"/api/leaves/{leave_id}/reject").status_code == 409
    assert client.patch("/api/leaves/77/reject").status_code == 404
    assert stores["notifier"].sent == [(1, "Your application has been approved.")]

    listing = client.get("/api/leaves/0/10").get_json()["data"]
    assert listing["total"] == 1
    assert listing["applications"][0]["status"] == "Approved"


def test_leave_validation_error(client):
    _as_ann(client)

    resp = client.post(
        "/api/leaves",
        json={"leaveType": "Holiday", "fromDate": "14/01/2025", "toDate": "16/01/2025", "reason": "sun"},
    )

    assert resp.status_code == 422
    assert resp.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_approved_sick_leave_is_paid_on_import(client, stores):
    _as_admin(client)
    client.post(
        "/api/leaves",
        json={"employee": 1, "leaveType": "Sick Leave", "fromDate": "16/01/2025", "toDate": "16/01/2025", "reason": "flu"},
    )

    _upload(client)

    statuses = [r.status.value for r in stores["attendance"].records]
    assert statuses == ["Present", "Leave"]
    assert stores["employees"].get_by_id(1).salary.deductions == Decimal("0.00")
