from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .model import AttendanceRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceEarnings:
    days_worked: int
    total_work_hours: float
    gross_earnings: float


def aggregate_attendance(records: Iterable[AttendanceRecord], daily_rate: float) -> AttendanceEarnings:
    """Count valid days (log-in present) and derive basic pay from the daily rate."""

    days_worked = 0
    total_hours = 0.0
    for record in records:
        if not record.is_valid:
            logger.warning("Invalid attendance record (no log in): %s", record.work_date)
            continue
        days_worked += 1
        total_hours += record.work_hours

    if days_worked == 0:
        logger.warning("No valid attendance found; basic pay is 0")

    return AttendanceEarnings(
        days_worked=days_worked,
        total_work_hours=total_hours,
        gross_earnings=days_worked * daily_rate,
    )
