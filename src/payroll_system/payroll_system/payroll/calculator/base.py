from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Contributions:
    sss: float
    philhealth: float
    pagibig: float
    tax: float

    @property
    def total(self) -> float:
        return self.sss + self.philhealth + self.pagibig + self.tax


class ContributionCalculator(ABC):
    """Statutory contribution rules (Strategy Pattern for payroll)."""

    @abstractmethod
    def sss(self, monthly_salary: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def philhealth(self, monthly_salary: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def pagibig(self, monthly_salary: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def income_tax(self, monthly_salary: float) -> float:
        raise NotImplementedError

    def calculate(self, monthly_salary: float) -> Contributions:
        return Contributions(
            sss=self.sss(monthly_salary),
            philhealth=self.philhealth(monthly_salary),
            pagibig=self.pagibig(monthly_salary),
            tax=self.income_tax(monthly_salary),
        )
