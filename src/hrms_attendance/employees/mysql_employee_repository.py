from __future__ import annotations

from typing import Any, Dict, Optional

from ..common.money import to_money
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from ..payroll.model import Salary
from .department_model import Department
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.employee_code, e.full_name, e.version,
           e.salary_base, e.salary_deductions, e.salary_final_amount, e.salary_last_updated,
           d.dept_id, d.dept_name, d.open_time, d.close_time
    FROM employees e
    JOIN departments d ON d.dept_id = e.dept_id
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        employee_code=r["employee_code"],
        full_name=r["full_name"],
        department=Department(
            dept_id=int(r["dept_id"]),
            dept_name=r["dept_name"],
            open_time=normalize_mysql_time(r["open_time"]),
            close_time=normalize_mysql_time(r["close_time"]),
        ),
        salary=Salary(
            base=to_money(r["salary_base"]),
            deductions=to_money(r["salary_deductions"]),
            final_amount=to_money(r["salary_final_amount"]),
            last_updated=r.get("salary_last_updated"),
        ),
        version=int(r.get("version") or 0),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_code=%s", (employee_code,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None
