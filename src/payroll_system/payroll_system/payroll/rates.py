from __future__ import annotations

from ..core.constants import STANDARD_WORKING_DAYS_PER_MONTH, STANDARD_WORKING_HOURS_PER_DAY


def daily_rate(monthly_salary: float) -> float:
    return monthly_salary / STANDARD_WORKING_DAYS_PER_MONTH


def hourly_rate(daily: float) -> float:
    return daily / STANDARD_WORKING_HOURS_PER_DAY
