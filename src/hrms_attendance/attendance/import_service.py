"""Bulk import of a punch-clock export.

Rows are processed one by one, in file order. A row that fails never stops the
batch: it is logged and reported back to the caller in the :class:`ImportReport`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import IO, Callable, Optional, Sequence, Union

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_MAX_SAVE_RETRIES, DEFAULT_PUNCH_COLUMN_OFFSET, EMPLOYEE_ID_COLUMN
from ..core.exceptions import ConcurrencyError, NotFoundError
from ..employees.model import Employee
from ..employees.resolver import DirectoryResolver
from ..leaves.resolver import LeaveConflictResolver
from ..payroll.service import PayrollAdjuster
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .row_parser import CsvRow, PunchRow, normalize_punches, parse_row, read_rows
from .strategies.base import DayContext
from .time_window import compute_presence
from .writer import AttendanceWriter

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowFailure:
    row_number: int
    employee_code: str
    error: str
    error_type: str

    def to_dict(self) -> dict:
        return {
            "row": self.row_number,
            "employeeId": self.employee_code,
            "error": self.error,
            "errorType": self.error_type,
        }


@dataclass(frozen=True)
class SkippedRow:
    row_number: int
    employee_code: str

    def to_dict(self) -> dict:
        return {"row": self.row_number, "employeeId": self.employee_code}


@dataclass
class ImportReport:
    total_rows: int = 0
    processed: int = 0
    skipped_rows: list[SkippedRow] = field(default_factory=list)
    failures: list[RowFailure] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalRows": self.total_rows,
            "processed": self.processed,
            "skipped": [s.to_dict() for s in self.skipped_rows],
            "failures": [f.to_dict() for f in self.failures],
        }


class AttendanceImportService:
    def __init__(
        self,
        directory: DirectoryResolver,
        leaves: LeaveConflictResolver,
        writer: AttendanceWriter,
        *,
        classifier: Optional[AttendanceStrategyFactory] = None,
        adjuster: Optional[PayrollAdjuster] = None,
        punch_offset: int = DEFAULT_PUNCH_COLUMN_OFFSET,
        max_save_retries: int = DEFAULT_MAX_SAVE_RETRIES,
        clock: Callable[[], datetime] = now_local,
    ):
        if max_save_retries < 0:
            raise ValueError("max_save_retries must be >= 0")
        self._directory = directory
        self._leaves = leaves
        self._writer = writer
        self._classifier = classifier or AttendanceStrategyFactory()
        self._adjuster = adjuster or PayrollAdjuster()
        self._punch_offset = int(punch_offset)
        self._max_save_retries = int(max_save_retries)
        self._clock = clock

    def import_file(self, source: Union[bytes, str, IO]) -> ImportReport:
        # ImportFileError propagates: nothing has been written yet.
        return self.import_rows(read_rows(source))

    def import_rows(self, rows: Sequence[CsvRow]) -> ImportReport:
        report = ImportReport(total_rows=len(rows))

        for row in rows:
            code = (row.get(EMPLOYEE_ID_COLUMN) or "").strip()
            try:
                if self._import_row(row):
                    report.processed += 1
                else:
                    report.skipped_rows.append(SkippedRow(row_number=row.row_number, employee_code=code))
            except Exception as e:
                log.exception("attendance row %s (employee %r) failed", row.row_number, code)
                report.failures.append(
                    RowFailure(
                        row_number=row.row_number,
                        employee_code=code,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                )

        log.info(
            "attendance import finished: rows=%s processed=%s skipped=%s failed=%s",
            report.total_rows,
            report.processed,
            len(report.skipped_rows),
            len(report.failures),
        )
        return report

    def _import_row(self, row: CsvRow) -> bool:
        """Returns False when the row names an unknown employee."""

        punch_row = parse_row(row, punch_offset=self._punch_offset)
        try:
            employee = self._directory.resolve(punch_row.employee_code)
        except NotFoundError:
            log.warning("attendance row %s skipped: unknown employee %r", row.row_number, punch_row.employee_code)
            return False

        attempt = 0
        while True:
            try:
                self._apply(punch_row, employee)
                return True
            except ConcurrencyError:
                attempt += 1
                if attempt > self._max_save_retries:
                    raise
                log.warning(
                    "salary of employee %r changed during import, retrying row %s (%s/%s)",
                    employee.employee_code,
                    row.row_number,
                    attempt,
                    self._max_save_retries,
                )
                employee = self._directory.resolve(punch_row.employee_code)

    def _apply(self, punch_row: PunchRow, employee: Employee) -> AttendanceRecord:
        dept = employee.department
        work_date = punch_row.work_date

        punches = normalize_punches(punch_row.raw_punches, dept.close_time)
        window = compute_presence(punches, dept.open_time, dept.close_time)
        leave = None
        if not punches:
            leave = self._leaves.resolve(employee_id=employee.employee_id, on_date=work_date)

        decision = self._classifier.classify(
            DayContext(punches=punches, leave=leave, presence=window.presence, window=window.window)
        )

        now = self._clock()
        salary = employee.salary
        existing = self._writer.existing_for(employee.employee_id, work_date)
        if existing is not None:
            salary = self._adjuster.reverse(salary, existing, now=now)
        adjustment = self._adjuster.apply(salary, decision, work_date=work_date, now=now)

        record = AttendanceRecord(
            employee_id=employee.employee_id,
            work_date=work_date,
            status=decision.status,
            day_salary=adjustment.day_salary,
            deduction=adjustment.deduction,
            entry_exit_time=window.timestamps(work_date),
        )
        return self._writer.write(employee, adjustment.salary, record, replaces=existing)
