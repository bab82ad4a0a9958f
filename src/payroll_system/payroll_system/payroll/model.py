from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Iterable, Optional


@dataclass(frozen=True)
class PayrollResult:
    """Payroll of one employee for one period.

    Built once per request and never cached; amounts are unrounded floats.
    """

    employee_id: int
    period_start: date
    period_end: date

    monthly_rate: float
    daily_rate: float
    hourly_rate: float

    days_worked: int
    total_work_hours: float
    gross_earnings: float

    total_overtime_hours: float
    overtime_pay: float

    rice_subsidy: float
    phone_allowance: float
    clothing_allowance: float

    late_deduction: float
    undertime_deduction: float
    unpaid_leave_days: int
    unpaid_leave_deduction: float

    sss: float
    philhealth: float
    pagibig: float
    tax: float

    gross_pay: float
    total_deductions: float
    net_pay: float

    def to_dict(self) -> dict:
        out = asdict(self)
        out["period_start"] = self.period_start.strftime("%Y-%m-%d")
        out["period_end"] = self.period_end.strftime("%Y-%m-%d")
        return out


@dataclass(frozen=True)
class RosterEntry:
    employee_id: int
    payroll: Optional[PayrollResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.payroll is not None


@dataclass(frozen=True)
class PayrollRunSummary:
    total_employees: int = 0
    total_gross_pay: float = 0.0
    total_deductions: float = 0.0
    total_net_pay: float = 0.0
    total_sss: float = 0.0
    total_philhealth: float = 0.0
    total_pagibig: float = 0.0
    total_tax: float = 0.0

    @classmethod
    def from_results(cls, results: Iterable[PayrollResult]) -> "PayrollRunSummary":
        results = list(results)
        return cls(
            total_employees=len(results),
            total_gross_pay=sum(r.gross_pay for r in results),
            total_deductions=sum(r.total_deductions for r in results),
            total_net_pay=sum(r.net_pay for r in results),
            total_sss=sum(r.sss for r in results),
            total_philhealth=sum(r.philhealth for r in results),
            total_pagibig=sum(r.pagibig for r in results),
            total_tax=sum(r.tax for r in results),
        )
