from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Login account. Employees are linked to their employee row; admins need not be."""

    account_id: int
    username: str
    password_hash: str
    role: Role
    employee_id: Optional[int]
    is_active: bool = True


@dataclass(frozen=True)
class SessionAccount:
    """What we store into the Flask session after login."""

    account_id: int
    role: Role
    employee_id: Optional[int]

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def can_access_employee(self, employee_id: int) -> bool:
        return self.is_admin or (self.employee_id is not None and int(self.employee_id) == int(employee_id))
