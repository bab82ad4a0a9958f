"""Example: calling the payroll service directly (no Flask).

Controllers stay thin; the business rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    payroll = container.payroll_service.calculate(3, date(2024, 6, 1), date(2024, 6, 30))
    print(payroll.to_dict())


if __name__ == "__main__":
    main()
