from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.constants import UNPAID_LEAVE_TYPE
from ..core.enums import RequestStatus
from .model import LeaveRecord


@dataclass(frozen=True)
class UnpaidLeave:
    days: int = 0
    deduction: float = 0.0


def is_unpaid(record: LeaveRecord) -> bool:
    return record.status == RequestStatus.APPROVED and record.leave_type.strip().lower() == UNPAID_LEAVE_TYPE.lower()


def calculate_unpaid_leave(records: Iterable[LeaveRecord], daily_rate: float) -> UnpaidLeave:
    days = sum(int(r.leave_days) for r in records if is_unpaid(r))
    return UnpaidLeave(days=days, deduction=days * daily_rate)
