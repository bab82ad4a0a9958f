from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_employee_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        """Records with start_date <= work_date <= end_date, in any order."""

        raise NotImplementedError

    def get_all_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
