from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.constants import LATE_THRESHOLD_TIME, STANDARD_LOGOUT_TIME


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance day of an employee.

    A record is valid (counts as a worked day) when log_in is present; log_out is optional.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    log_in: Optional[time]
    log_out: Optional[time]

    @property
    def is_valid(self) -> bool:
        return self.log_in is not None

    @property
    def work_hours(self) -> float:
        if self.log_in is None or self.log_out is None:
            return 0.0
        seconds = (
            datetime.combine(self.work_date, self.log_out) - datetime.combine(self.work_date, self.log_in)
        ).total_seconds()
        return max(seconds, 0.0) / 3600.0

    @property
    def is_late(self) -> bool:
        return self.log_in is not None and self.log_in > LATE_THRESHOLD_TIME

    @property
    def has_undertime(self) -> bool:
        return self.log_out is not None and self.log_out < STANDARD_LOGOUT_TIME
