from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.strategies.base import StatusDecision
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Salary


@dataclass(frozen=True)
class Adjustment:
    salary: Salary
    day_salary: Decimal
    deduction: Decimal


class PayrollAdjuster:
    def __init__(self, *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or StandardPayrollCalculator()

    def apply(self, salary: Salary, decision: StatusDecision, *, work_date: date, now: datetime) -> Adjustment:
        """Credit the day and deduct the rest; last_updated moves even when nothing is deducted."""

        one_day = self._calculator.one_day_salary(salary.base, work_date)
        pay = self._calculator.day_pay(decision, one_day)
        return Adjustment(
            salary=salary.deduct(pay.deduction, at=now),
            day_salary=pay.day_salary,
            deduction=pay.deduction,
        )

    def reverse(self, salary: Salary, record: AttendanceRecord, *, now: datetime) -> Salary:
        """Give back the deduction an earlier record of the same day applied."""

        return salary.deduct(-record.deduction, at=now)
