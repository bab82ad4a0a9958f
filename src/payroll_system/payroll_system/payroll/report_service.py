from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date

from ..attendance.model import AttendanceRecord
from ..attendance.report import AttendanceSummary, summarize_attendance
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_period
from ..common.validators import require_period
from .model import PayrollRunSummary, RosterEntry
from .service import PayrollService


@dataclass(frozen=True)
class PayrollRunReport:
    period_start: date
    period_end: date
    entries: list[RosterEntry]
    summary: PayrollRunSummary
    failed: list[RosterEntry] = field(default_factory=list)


class PayrollReportService:
    def __init__(self, attendance: AttendanceRepository, payroll: PayrollService):
        self._attendance = attendance
        self._payroll = payroll

    def build_attendance_summary(self, *, start: date, end: date) -> AttendanceSummary:
        start, end = require_period(start, end)
        by_employee: dict[int, list[AttendanceRecord]] = defaultdict(list)
        for record in self._attendance.get_all_between(start_date=start, end_date=end):
            by_employee[record.employee_id].append(record)
        return summarize_attendance(by_employee, start=start, end=end)

    def build_monthly_payroll(self, *, year: int, month: int) -> PayrollRunReport:
        entries = self._payroll.calculate_month(year, month)
        ok = [e.payroll for e in entries if e.ok]
        start, end = month_period(year, month)
        return PayrollRunReport(
            period_start=start,
            period_end=end,
            entries=entries,
            summary=PayrollRunSummary.from_results(ok),
            failed=[e for e in entries if not e.ok],
        )
