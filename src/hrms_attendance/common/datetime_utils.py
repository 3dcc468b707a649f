from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta

from ..core.exceptions import PunchFormatError, ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def parse_date(value: str, fmt: str) -> date:
    try:
        return datetime.strptime((value or "").strip(), fmt).date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}")


def parse_time_of_day(value: str) -> time:
    """Parse a device punch like ``09:05:00`` (or unpadded ``9:5:0``) into a time.

    Seconds are optional; anything else is a PunchFormatError.
    """

    parts = (value or "").strip().split(":")
    if len(parts) not in (2, 3) or not all(p.strip().isdigit() for p in parts):
        raise PunchFormatError(f"Invalid punch time {value!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    seconds = int(parts[2]) if len(parts) == 3 else 0
    try:
        return time(hour=hours, minute=minutes, second=seconds)
    except ValueError:
        raise PunchFormatError(f"Invalid punch time {value!r}")


def time_to_timedelta(t: time) -> timedelta:
    """Offset of a time of day from midnight of the reference day."""
    return timedelta(hours=t.hour, minutes=t.minute, seconds=t.second)


def days_in_month(d: date) -> int:
    return calendar.monthrange(d.year, d.month)[1]


def now_local() -> datetime:
    """Default clock of the import pipeline."""
    return datetime.now()
