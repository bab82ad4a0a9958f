from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Sequence

from ..common.datetime_utils import count_working_days
from .model import AttendanceRecord


@dataclass(frozen=True)
class AttendanceSummary:
    total_employees: int = 0
    working_days: int = 0
    total_present_days: int = 0
    total_late_days: int = 0
    total_absent_days: int = 0
    total_work_hours: float = 0.0
    average_work_hours: float = 0.0
    attendance_rate: float = 0.0


def summarize_attendance(
    records_by_employee: Mapping[int, Sequence[AttendanceRecord]],
    *,
    start: date,
    end: date,
) -> AttendanceSummary:
    """Roll up attendance for a group of employees over a period.

    Absent days are expected working days minus present days. Approved leave is not
    subtracted, so a day on leave is also counted as absent.
    """

    if not records_by_employee:
        return AttendanceSummary()

    total_employees = len(records_by_employee)
    present = 0
    late = 0
    hours = 0.0
    for records in records_by_employee.values():
        for record in records:
            present += 1
            hours += record.work_hours
            if record.is_late:
                late += 1

    working_days = count_working_days(start, end)
    expected = total_employees * working_days

    return AttendanceSummary(
        total_employees=total_employees,
        working_days=working_days,
        total_present_days=present,
        total_late_days=late,
        total_absent_days=expected - present,
        total_work_hours=hours,
        average_work_hours=hours / present if present else 0.0,
        attendance_rate=present / expected * 100 if working_days > 0 else 0.0,
    )
