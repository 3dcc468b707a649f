from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import NO_PAY, AttendanceStrategy, DayContext, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    def decide(self, ctx: DayContext) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT, paid_share=NO_PAY)
