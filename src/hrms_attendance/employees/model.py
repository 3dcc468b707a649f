from __future__ import annotations

from dataclasses import dataclass

from ..payroll.model import Salary
from .department_model import Department


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``employee_code`` is the identifier printed by the punch device ("Employee ID"
    column); ``employee_id`` is the database key. ``version`` guards salary writes.
    """

    employee_id: int
    employee_code: str
    full_name: str
    department: Department
    salary: Salary
    version: int = 0
