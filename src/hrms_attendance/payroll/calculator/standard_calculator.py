from __future__ import annotations

from datetime import date
from decimal import Decimal

from ...attendance.strategies.base import FULL_DAY, StatusDecision
from ...common.datetime_utils import days_in_month
from ...common.money import to_money
from .base import DayPay, PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: a day is base / days in that month.

    Credit and deduction are each rounded from their own share of the day, so a
    half day credits and deducts the same amount even when the day has an odd
    number of cents.
    """

    def one_day_salary(self, base: Decimal, work_date: date) -> Decimal:
        return to_money(Decimal(base) / days_in_month(work_date))

    def day_pay(self, decision: StatusDecision, one_day_salary: Decimal) -> DayPay:
        return DayPay(
            day_salary=to_money(one_day_salary * decision.paid_share),
            deduction=to_money(one_day_salary * (FULL_DAY - decision.paid_share)),
        )
