from __future__ import annotations

from .base import ContributionCalculator

# (upper bound of monthly salary, employee share)
SSS_BRACKETS: tuple[tuple[float, float], ...] = (
    (4000, 180.00),
    (4750, 202.50),
    (5500, 225.00),
    (6250, 247.50),
    (7000, 270.00),
    (7750, 292.50),
    (8500, 315.00),
    (9250, 337.50),
    (10000, 360.00),
    (15000, 540.00),
    (20000, 720.00),
    (25000, 900.00),
)
SSS_MAX = 1125.00

PHILHEALTH_RATE = 0.05
PHILHEALTH_MIN = 500.00
PHILHEALTH_MAX = 5000.00

PAGIBIG_LOW_INCOME_CEILING = 1500
PAGIBIG_LOW_RATE = 0.01
PAGIBIG_RATE = 0.02
PAGIBIG_MAX = 200.00

# (annual upper bound, base tax, rate on the excess over the previous bound)
TAX_BRACKETS: tuple[tuple[float, float, float], ...] = (
    (250_000, 0.0, 0.0),
    (400_000, 0.0, 0.15),
    (800_000, 22_500, 0.20),
    (2_000_000, 102_500, 0.25),
    (8_000_000, 402_500, 0.30),
    (float("inf"), 2_202_500, 0.35),
)


class StandardContributionCalculator(ContributionCalculator):
    """Government tables: SSS step table, PhilHealth clamp, Pag-IBIG cap, graduated income tax."""

    def sss(self, monthly_salary: float) -> float:
        for ceiling, amount in SSS_BRACKETS:
            if monthly_salary <= ceiling:
                return amount
        return SSS_MAX

    def philhealth(self, monthly_salary: float) -> float:
        employee_share = monthly_salary * PHILHEALTH_RATE / 2
        return min(max(employee_share, PHILHEALTH_MIN), PHILHEALTH_MAX)

    def pagibig(self, monthly_salary: float) -> float:
        if monthly_salary <= PAGIBIG_LOW_INCOME_CEILING:
            return monthly_salary * PAGIBIG_LOW_RATE
        return min(monthly_salary * PAGIBIG_RATE, PAGIBIG_MAX)

    def income_tax(self, monthly_salary: float) -> float:
        annual = monthly_salary * 12
        floor = 0.0
        annual_tax = 0.0
        for ceiling, base, rate in TAX_BRACKETS:
            if annual <= ceiling:
                annual_tax = base + (annual - floor) * rate
                break
            floor = ceiling
        return annual_tax / 12
