from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import require_non_negative


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee with monthly salary and fixed allowances.

    Plain data object, no database access.
    """

    employee_id: int
    first_name: str
    last_name: str
    basic_salary: float
    rice_subsidy: float = 0.0
    phone_allowance: float = 0.0
    clothing_allowance: float = 0.0
    position: Optional[str] = None
    status: Optional[str] = None

    def __post_init__(self) -> None:
        require_non_negative(self.basic_salary, "Basic salary")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def total_allowances(self) -> float:
        return self.rice_subsidy + self.phone_allowance + self.clothing_allowance
