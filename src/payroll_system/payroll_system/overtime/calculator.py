from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.constants import OVERTIME_RATE_MULTIPLIER
from .model import OvertimeRecord


@dataclass(frozen=True)
class OvertimePay:
    total_hours: float = 0.0
    pay: float = 0.0


def calculate_overtime(records: Iterable[OvertimeRecord], hourly_rate: float) -> OvertimePay:
    """Approved hours only, paid at 125% of the hourly rate."""

    total_hours = sum(r.hours for r in records if r.approved)
    return OvertimePay(total_hours=total_hours, pay=total_hours * hourly_rate * OVERTIME_RATE_MULTIPLIER)
