from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Account
from .repository import AccountRepository


class MySQLAccountRepository(AccountRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[Account]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT account_id, username, password_hash, role, employee_id, is_active
                FROM accounts
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Account(
                account_id=int(row["account_id"]),
                username=row["username"],
                password_hash=row["password_hash"],
                role=Role(row["role"]),
                employee_id=row.get("employee_id"),
                is_active=bool(row.get("is_active", True)),
            )
