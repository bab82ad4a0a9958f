from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import minutes_between
from ..core.constants import STANDARD_LOGIN_TIME, STANDARD_LOGOUT_TIME
from .model import AttendanceRecord


def late_deduction(records: Iterable[AttendanceRecord], hourly_rate: float) -> float:
    """Charge late log-ins.

    Log-ins up to 08:15 are free; past 08:15 the whole gap from 08:00 is charged.
    """

    total = 0.0
    for record in records:
        if record.is_late:
            minutes_late = minutes_between(STANDARD_LOGIN_TIME, record.log_in)
            total += (minutes_late / 60.0) * hourly_rate
    return total


def undertime_deduction(records: Iterable[AttendanceRecord], hourly_rate: float) -> float:
    total = 0.0
    for record in records:
        if record.has_undertime:
            minutes_short = minutes_between(record.log_out, STANDARD_LOGOUT_TIME)
            total += (minutes_short / 60.0) * hourly_rate
    return total
