from __future__ import annotations

from dataclasses import dataclass

from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy, DayContext, StatusDecision
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.leave_strategy import LeaveStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the strategy for an imported day, rules in order."""

    def for_day(self, ctx: DayContext) -> AttendanceStrategy:
        if not ctx.punches:
            if ctx.leave is not None:
                return LeaveStrategy()
            return AbsentStrategy()

        if ctx.presence <= ctx.window / 2:
            return HalfDayStrategy()
        return PresentStrategy()

    def classify(self, ctx: DayContext) -> StatusDecision:
        return self.for_day(ctx).decide(ctx)
