from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError


def require_positive_id(value: int, field_name: str) -> int:
    if value is None or int(value) <= 0:
        raise ValidationError(f"Invalid {field_name}: {value}")
    return int(value)


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return value


def require_period(start: Optional[date], end: Optional[date]) -> tuple[date, date]:
    if start is None or end is None:
        raise ValidationError("Period dates cannot be null")
    if end < start:
        raise ValidationError("Period end cannot be before period start")
    return start, end
