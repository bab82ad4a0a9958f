from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class OvertimeRecord:
    overtime_id: int
    employee_id: int
    start_date: date
    end_date: date
    hours: float
    approved: bool = False
