from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Sequence

from ..common.datetime_utils import time_to_timedelta
from ..core.exceptions import ValidationError

ZERO = timedelta(0)


@dataclass(frozen=True)
class PresenceWindow:
    presence: timedelta
    window: timedelta
    pairs: tuple[tuple[time, time], ...]

    def timestamps(self, on_date: date) -> tuple[datetime, ...]:
        out: list[datetime] = []
        for entry, exit_ in self.pairs:
            out.append(datetime.combine(on_date, entry))
            out.append(datetime.combine(on_date, exit_))
        return tuple(out)


def overlap(entry: time, exit_: time, open_time: time, close_time: time) -> timedelta:
    """Part of [entry, exit] inside [open, close]; never negative."""

    start = max(time_to_timedelta(entry), time_to_timedelta(open_time))
    end = min(time_to_timedelta(exit_), time_to_timedelta(close_time))
    return max(ZERO, end - start)


def compute_presence(punches: Sequence[time], open_time: time, close_time: time) -> PresenceWindow:
    """Sum the office-window overlap of (p0, p1), (p2, p3), ...

    ``punches`` must already be normalized to an even count.
    """

    if len(punches) % 2:
        raise ValueError("punches must be normalized to entry/exit pairs")

    window = time_to_timedelta(close_time) - time_to_timedelta(open_time)
    pairs = tuple((punches[i], punches[i + 1]) for i in range(0, len(punches), 2))
    if pairs and window <= ZERO:
        raise ValidationError(f"Office window {open_time}-{close_time} closes before it opens")

    presence = sum((overlap(entry, exit_, open_time, close_time) for entry, exit_ in pairs), ZERO)
    return PresenceWindow(presence=presence, window=window, pairs=pairs)
