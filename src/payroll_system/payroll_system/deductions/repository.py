from __future__ import annotations

from typing import Protocol

from ..core.exceptions import DataSourceUnavailableError
from .model import DeductionRecord


class DeductionRepository(Protocol):
    def add(self, record: DeductionRecord) -> int:
        raise NotImplementedError


class UnavailableDeductionRepository(DeductionRepository):
    """Stand-in used when deduction line items cannot be stored."""

    def add(self, record: DeductionRecord) -> int:
        raise DataSourceUnavailableError("Deduction table is not available")
