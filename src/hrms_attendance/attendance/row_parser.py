"""Punch-clock CSV rows.

The device export has a fixed layout: named "Employee ID", "Date" and "Times"
columns followed, from a fixed column offset, by the day's punches in
``HH:MM:SS`` form, consumed pairwise as entry/exit.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date, time
from typing import IO, Any, Optional, Sequence, Union

from ..common.datetime_utils import parse_iso_date, parse_time_of_day
from ..core.constants import (
    DATE_COLUMN,
    DEFAULT_PUNCH_COLUMN_OFFSET,
    EMPLOYEE_ID_COLUMN,
    NO_PUNCH_SENTINELS,
    TIMES_COLUMN,
)
from ..core.exceptions import ImportFileError

REQUIRED_COLUMNS = (EMPLOYEE_ID_COLUMN, DATE_COLUMN, TIMES_COLUMN)


@dataclass(frozen=True)
class CsvRow:
    row_number: int
    header: tuple[str, ...]
    values: tuple[str, ...]

    def get(self, column: str) -> Optional[str]:
        try:
            idx = self.header.index(column)
        except ValueError:
            return None
        return self.values[idx] if idx < len(self.values) else None


@dataclass(frozen=True)
class PunchRow:
    row_number: int
    employee_code: str
    work_date: date
    raw_punches: tuple[str, ...]


def read_rows(source: Union[bytes, str, IO]) -> list[CsvRow]:
    """Read the whole upload up front; an unreadable stream fails the request."""

    try:
        raw = source.read() if hasattr(source, "read") else source
        text = raw.decode("utf-8-sig") if isinstance(raw, (bytes, bytearray)) else str(raw)
        reader = csv.reader(io.StringIO(text))
        header = tuple((h or "").strip() for h in next(reader, ()))
        rows = [
            CsvRow(row_number=n, header=header, values=tuple(values))
            for n, values in enumerate(reader, start=1)
            if any((v or "").strip() for v in values)
        ]
    except (UnicodeDecodeError, csv.Error) as e:
        raise ImportFileError(f"Unreadable attendance file: {e}")

    missing = [c for c in REQUIRED_COLUMNS if c not in header]
    if missing:
        raise ImportFileError(f"Attendance file is missing columns: {', '.join(missing)}")
    return rows


def has_no_punches(times: Any) -> bool:
    if times is None:
        return True
    if isinstance(times, (int, float)):
        return times == 0
    return str(times).strip() in NO_PUNCH_SENTINELS


def _drop_padding(values: Sequence[str]) -> tuple[str, ...]:
    # Short rows are padded to the header width with empty cells; drop them
    # pair by pair so a single dangling empty exit still reaches normalize_punches.
    out = list(values)
    while len(out) >= 2 and not out[-1].strip() and not out[-2].strip():
        del out[-2:]
    return tuple(out)


def parse_row(row: CsvRow, *, punch_offset: int = DEFAULT_PUNCH_COLUMN_OFFSET) -> PunchRow:
    work_date = parse_iso_date(row.get(DATE_COLUMN) or "")
    if has_no_punches(row.get(TIMES_COLUMN)):
        punches: tuple[str, ...] = ()
    else:
        punches = _drop_padding(row.values[punch_offset:])
    return PunchRow(
        row_number=row.row_number,
        employee_code=(row.get(EMPLOYEE_ID_COLUMN) or "").strip(),
        work_date=work_date,
        raw_punches=punches,
    )


def normalize_punches(raw_punches: Sequence[str], close_time: time) -> list[time]:
    """Pair up punches; a missing final exit means "present until closing"."""

    values = list(raw_punches)
    if not values:
        return []

    closing = close_time.strftime("%H:%M:%S")
    if len(values) % 2:
        values.append(closing)
    elif not values[-1].strip():
        values[-1] = closing
    return [parse_time_of_day(v) for v in values]
