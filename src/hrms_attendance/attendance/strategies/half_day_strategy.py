from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import HALF_DAY, AttendanceStrategy, DayContext, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Punched in, but for at most half of the office window."""

    def decide(self, ctx: DayContext) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY, paid_share=HALF_DAY)
