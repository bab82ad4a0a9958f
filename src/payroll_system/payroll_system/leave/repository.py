from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.exceptions import DataSourceUnavailableError
from .model import LeaveRecord


class LeaveRepository(Protocol):
    def get_approved_for_employee_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[LeaveRecord]:
        raise NotImplementedError


class UnavailableLeaveRepository(LeaveRepository):
    """Stand-in used when no leave request store is configured."""

    def get_approved_for_employee_between(self, employee_id: int, *, start_date: date, end_date: date) -> Sequence[LeaveRecord]:
        raise DataSourceUnavailableError("Leave request data is not available")
