from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import FULL_DAY, NO_PAY, AttendanceStrategy, DayContext, StatusDecision


class LeaveStrategy(AttendanceStrategy):
    """No punches on a day covered by approved leave; sick leave is paid."""

    def decide(self, ctx: DayContext) -> StatusDecision:
        if ctx.leave is None:
            raise ValueError("LeaveStrategy needs an approved leave")
        return StatusDecision(
            status=AttendanceStatus.LEAVE,
            paid_share=FULL_DAY if ctx.leave.is_paid else NO_PAY,
        )
