from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.money import to_money


@dataclass(frozen=True)
class Salary:
    """Monthly salary accumulators of one employee.

    ``final_amount`` always equals ``base - deductions``; both sides move by the
    same delta in :meth:`deduct`.
    """

    base: Decimal
    deductions: Decimal
    final_amount: Decimal
    last_updated: Optional[datetime] = None

    def deduct(self, amount: Decimal, *, at: datetime) -> "Salary":
        amount = to_money(amount)
        return replace(
            self,
            deductions=self.deductions + amount,
            final_amount=self.final_amount - amount,
            last_updated=at,
        )

    def is_consistent(self) -> bool:
        return self.final_amount == self.base - self.deductions
