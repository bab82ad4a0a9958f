from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def month_period(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def count_working_days(start: date, end: date) -> int:
    """Monday to Friday dates in the inclusive range."""
    days = 0
    current = start
    while current <= end:
        if current.weekday() < 5:
            days += 1
        current += timedelta(days=1)
    return days


def minutes_between(earlier: time, later: time) -> int:
    """Whole minutes from `earlier` to `later` on the same day (truncated)."""
    anchor = date(2000, 1, 1)
    delta = datetime.combine(anchor, later) - datetime.combine(anchor, earlier)
    return int(delta.total_seconds() // 60)
