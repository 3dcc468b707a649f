from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import time, timedelta
from decimal import Decimal
from typing import Optional, Sequence

from ...core.enums import AttendanceStatus
from ...leaves.model import LeaveApplication

FULL_DAY = Decimal("1")
HALF_DAY = Decimal("0.5")
NO_PAY = Decimal("0")


@dataclass(frozen=True)
class DayContext:
    punches: Sequence[time]
    leave: Optional[LeaveApplication]
    presence: timedelta
    window: timedelta


@dataclass(frozen=True)
class StatusDecision:
    """Status plus the share of one day's salary that is credited."""

    status: AttendanceStatus
    paid_share: Decimal


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide(self, ctx: DayContext) -> StatusDecision:
        raise NotImplementedError
