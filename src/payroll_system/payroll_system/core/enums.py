from __future__ import annotations

from enum import Enum


class RequestStatus(str, Enum):
    """Approval state of leave/overtime requests as stored in the database."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class DeductionType(str, Enum):
    """Deduction line items persisted after a payroll calculation."""

    LATE = "Late"
    UNDERTIME = "Undertime"
    UNPAID_LEAVE = "UnpaidLeave"
