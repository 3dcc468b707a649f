from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveApplication
from .repository import LeaveRepository

_COLUMNS = """
    leave_id, employee_id, leave_type, from_date, to_date, reason,
    status, created_at, decided_by, decided_at
"""


def _to_leave(r: Dict[str, Any]) -> LeaveApplication:
    return LeaveApplication(
        leave_id=int(r["leave_id"]),
        employee_id=int(r["employee_id"]),
        leave_type=LeaveType(r["leave_type"]),
        from_date=r["from_date"],
        to_date=r["to_date"],
        reason=r["reason"],
        status=LeaveStatus(r["status"]),
        created_at=r["created_at"],
        decided_by=r.get("decided_by"),
        decided_at=r.get("decided_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_approved_covering(self, *, employee_id: int, on_date: date) -> Sequence[LeaveApplication]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_applications
                WHERE employee_id=%s AND status=%s AND from_date <= %s AND to_date >= %s
                ORDER BY leave_id
                """,
                (int(employee_id), LeaveStatus.APPROVED.value, on_date, on_date),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        leave_type: LeaveType,
        from_date: date,
        to_date: date,
        reason: str,
        status: LeaveStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_applications(employee_id, leave_type, from_date, to_date, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), leave_type.value, from_date, to_date, reason, status.value),
            )
            return int(cur.lastrowid)

    def get_by_id(self, leave_id: int) -> Optional[LeaveApplication]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_applications WHERE leave_id=%s", (int(leave_id),))
            row = fetchone(cur)
            return _to_leave(row) if row else None

    def decide(self, *, leave_id: int, status: LeaveStatus, decided_by: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_applications
                SET status=%s, decided_by=%s, decided_at=NOW()
                WHERE leave_id=%s AND status=%s
                """,
                (status.value, int(decided_by), int(leave_id), LeaveStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def list_page(self, *, employee_id: Optional[int], offset: int, limit: int) -> Sequence[LeaveApplication]:
        clauses = ["1=1"]
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_applications
                WHERE {where}
                ORDER BY created_at DESC, leave_id DESC
                LIMIT %s OFFSET %s
                """,
                tuple(params + [int(limit), int(offset)]),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def count(self, *, employee_id: Optional[int]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            if employee_id is None:
                cur.execute("SELECT COUNT(*) AS n FROM leave_applications")
            else:
                cur.execute("SELECT COUNT(*) AS n FROM leave_applications WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
