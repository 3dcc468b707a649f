from datetime import date, datetime
from decimal import Decimal

import pytest

from hrms_attendance.attendance.model import AttendanceRecord
from hrms_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from hrms_attendance.core.enums import AttendanceStatus
from hrms_attendance.payroll.model import Salary


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.rowcount = 0
        self.lastrowid = None

    def execute(self, sql, params=()):
        statement = " ".join(sql.split())
        self._conn.statements.append(statement)
        if statement.startswith("UPDATE employees"):
            self.rowcount = self._conn.version_matches
        elif statement.startswith("INSERT INTO attendance_records"):
            if self._conn.fail_insert:
                raise RuntimeError("insert failed")
            self.lastrowid = 41
        else:
            self.rowcount = 1

    def close(self):
        pass


class FakeConnection:
    def __init__(self, *, version_matches=1, fail_insert=False):
        self.version_matches = version_matches
        self.fail_insert = fail_insert
        self.statements = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, conn):
        self._conn = conn

    def connect(self):
        return self._conn


def _save(conn, **kwargs):
    repo = MySQLAttendanceRepository(FakeConnectionFactory(conn))
    return repo.save_day(
        employee_id=1,
        salary=Salary(
            base=Decimal("31000.00"),
            deductions=Decimal("1000.00"),
            final_amount=Decimal("30000.00"),
            last_updated=datetime(2025, 1, 20, 10, 0),
        ),
        expected_version=0,
        record=AttendanceRecord(
            employee_id=1,
            work_date=date(2025, 1, 15),
            status=AttendanceStatus.ABSENT,
            day_salary=Decimal("0.00"),
            deduction=Decimal("1000.00"),
        ),
        **kwargs,
    )


def test_salary_and_record_commit_together():
    conn = FakeConnection()

    assert _save(conn) == 41
    assert [s.split(" ")[0] for s in conn.statements] == ["UPDATE", "INSERT"]
    assert conn.committed and not conn.rolled_back and conn.closed


def test_failed_record_insert_rolls_back_salary():
    conn = FakeConnection(fail_insert=True)

    with pytest.raises(RuntimeError):
        _save(conn)

    assert conn.statements[0].startswith("UPDATE employees")
    assert conn.rolled_back and not conn.committed and conn.closed


def test_stale_version_writes_no_record():
    conn = FakeConnection(version_matches=0)

    assert _save(conn) is None
    assert len(conn.statements) == 1


def test_replace_keeps_record_id():
    conn = FakeConnection()

    assert _save(conn, replace_record_id=7) == 7
    assert conn.statements[1].startswith("UPDATE attendance_records")
