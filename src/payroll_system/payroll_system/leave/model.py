from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class LeaveRecord:
    leave_id: int
    employee_id: int
    leave_type: str
    start_date: date
    end_date: date
    leave_days: int
    status: RequestStatus = RequestStatus.PENDING
