from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import DeductionType


@dataclass(frozen=True)
class DeductionRecord:
    employee_id: int
    deduction_type: DeductionType
    amount: float
    description: str
    deduction_date: date
