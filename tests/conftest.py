from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def june_period() -> tuple[date, date]:
    return date(2024, 6, 1), date(2024, 6, 30)
