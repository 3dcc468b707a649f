from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ...attendance.strategies.base import StatusDecision


@dataclass(frozen=True)
class DayPay:
    day_salary: Decimal
    deduction: Decimal


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def one_day_salary(self, base: Decimal, work_date: date) -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def day_pay(self, decision: StatusDecision, one_day_salary: Decimal) -> DayPay:
        raise NotImplementedError
