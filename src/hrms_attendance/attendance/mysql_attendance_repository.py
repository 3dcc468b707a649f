from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..common.money import to_money
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..payroll.model import Salary
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "record_id, employee_id, work_date, status, day_salary, deduction, entry_exit_time"


def _dump_times(record: AttendanceRecord) -> str:
    return json.dumps([t.isoformat() for t in record.entry_exit_time])


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        status=AttendanceStatus(r["status"]),
        day_salary=to_money(r["day_salary"]),
        deduction=to_money(r["deduction"]),
        entry_exit_time=tuple(datetime.fromisoformat(t) for t in json.loads(r.get("entry_exit_time") or "[]")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_day(
        self,
        *,
        employee_id: int,
        salary: Salary,
        expected_version: int,
        record: AttendanceRecord,
        replace_record_id: Optional[int] = None,
    ) -> Optional[int]:
        # Salary and record share one transaction: db_cursor rolls both back on error.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET salary_deductions=%s, salary_final_amount=%s, salary_last_updated=%s,
                    version=version + 1
                WHERE employee_id=%s AND version=%s
                """,
                (
                    salary.deductions,
                    salary.final_amount,
                    salary.last_updated,
                    int(employee_id),
                    int(expected_version),
                ),
            )
            if cur.rowcount <= 0:
                return None

            if replace_record_id is not None:
                cur.execute(
                    """
                    UPDATE attendance_records
                    SET status=%s, day_salary=%s, deduction=%s, entry_exit_time=%s
                    WHERE record_id=%s
                    """,
                    (
                        record.status.value,
                        record.day_salary,
                        record.deduction,
                        _dump_times(record),
                        int(replace_record_id),
                    ),
                )
                return int(replace_record_id)

            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, work_date, status, day_salary, deduction, entry_exit_time)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(record.employee_id),
                    record.work_date,
                    record.status.value,
                    record.day_salary,
                    record.deduction,
                    _dump_times(record),
                ),
            )
            return int(cur.lastrowid)

    def get_latest_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND work_date=%s
                ORDER BY record_id DESC
                LIMIT 1
                """,
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_page(self, *, employee_id: int, offset: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY record_id ASC
                LIMIT %s OFFSET %s
                """,
                (int(employee_id), int(limit), int(offset)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count_for_employee(self, employee_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM attendance_records WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
