from __future__ import annotations

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, ValidationError
from .model import SessionAccount
from .repository import AccountRepository


class AuthService:
    """Use case: authenticate an account (login)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    def authenticate(self, username: str, password: str) -> SessionAccount:
        try:
            username = require_non_empty(username, "Username")
        except ValidationError:
            raise AuthenticationError("Invalid username or password")

        account = self._accounts.get_by_username(username)
        if not account or not account.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(account.password_hash, password or "")
        except ValueError:
            # placeholder or corrupted hashes
            ok = False
        if not ok:
            raise AuthenticationError("Invalid username or password")

        return SessionAccount(account_id=account.account_id, role=account.role, employee_id=account.employee_id)
