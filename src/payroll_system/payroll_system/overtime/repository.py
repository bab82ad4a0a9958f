from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.exceptions import DataSourceUnavailableError
from .model import OvertimeRecord


class OvertimeRepository(Protocol):
    def get_for_employee_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[OvertimeRecord]:
        raise NotImplementedError


class UnavailableOvertimeRepository(OvertimeRepository):
    """Stand-in used when no overtime store is configured."""

    def get_for_employee_between(self, employee_id: int, *, start_date: date, end_date: date) -> Sequence[OvertimeRecord]:
        raise DataSourceUnavailableError("Overtime data is not available")
