"""Session helpers shared by the JSON controllers."""

from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import session

from ..accounts.model import SessionAccount
from ..core.enums import Role
from .http import fail


def store_account(account: SessionAccount) -> None:
    session.clear()
    session["account_id"] = account.account_id
    session["role"] = account.role.value
    session["employee_id"] = account.employee_id


def current_account() -> Optional[SessionAccount]:
    if "account_id" not in session:
        return None
    try:
        role = Role(session.get("role"))
    except ValueError:
        return None
    employee_id = session.get("employee_id")
    return SessionAccount(
        account_id=int(session["account_id"]),
        role=role,
        employee_id=int(employee_id) if employee_id is not None else None,
    )


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_account() is None:
            return fail("Please sign in", status=401, code="UNAUTHENTICATED")
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        account = current_account()
        if account is None:
            return fail("Please sign in", status=401, code="UNAUTHENTICATED")
        if not account.is_admin:
            return fail("Access Denied", status=403, code="FORBIDDEN")
        return view(*args, **kwargs)

    return wrapper
