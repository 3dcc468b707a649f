from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import FULL_DAY, AttendanceStrategy, DayContext, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """More than half of the office window covered."""

    def decide(self, ctx: DayContext) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, paid_share=FULL_DAY)
