import pytest
from werkzeug.security import generate_password_hash

from hrms_attendance.accounts.model import Account
from hrms_attendance.accounts.service import AuthService
from hrms_attendance.core.enums import Role
from hrms_attendance.core.exceptions import AuthenticationError


class FakeAccounts:
    def __init__(self, *accounts):
        self._by_name = {a.username: a for a in accounts}

    def get_by_username(self, username):
        return self._by_name.get(username)


def _service():
    return AuthService(
        FakeAccounts(
            Account(1, "admin", generate_password_hash("admin123"), Role.ADMIN, None),
            Account(2, "e001", generate_password_hash("employee123"), Role.EMPLOYEE, 1),
            Account(3, "gone", generate_password_hash("pw"), Role.EMPLOYEE, 2, is_active=False),
            Account(4, "broken", "not-a-hash", Role.EMPLOYEE, 2),
        )
    )


def test_authenticate_returns_session_account():
    account = _service().authenticate("e001", "employee123")

    assert account.account_id == 2
    assert account.role == Role.EMPLOYEE
    assert account.employee_id == 1
    assert account.can_access_employee(1)
    assert not account.can_access_employee(2)


def test_admin_can_access_everyone():
    account = _service().authenticate("admin", "admin123")

    assert account.is_admin
    assert account.can_access_employee(99)


@pytest.mark.parametrize(
    "username,password",
    [("admin", "wrong"), ("nobody", "x"), ("", "admin123"), ("gone", "pw"), ("broken", "x")],
)
def test_bad_credentials(username, password):
    with pytest.raises(AuthenticationError):
        _service().authenticate(username, password)
