"""Compute the payroll of every employee for one month and print a summary table."""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.payroll_system.payroll_system.container import build_container


def main() -> None:
    today = date.today()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month)
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(logging, getattr(settings, "LOG_LEVEL", "INFO")))

    container = build_container(db_config=settings.DB_CONFIG, max_workers=settings.ROSTER_MAX_WORKERS)
    report = container.payroll_report_service.build_monthly_payroll(year=args.year, month=args.month)

    print(f"Payroll {report.period_start:%b %Y} ({report.period_start} to {report.period_end})")
    for entry in report.entries:
        if entry.ok:
            p = entry.payroll
            print(f"{p.employee_id:>5} {p.days_worked:>4}d  gross {p.gross_pay:>12,.2f}  "
                  f"deductions {p.total_deductions:>12,.2f}  net {p.net_pay:>12,.2f}")
        else:
            print(f"{entry.employee_id:>5}  ERROR {entry.error}")

    s = report.summary
    print(f"Total ({s.total_employees} employees): gross {s.total_gross_pay:,.2f}  "
          f"deductions {s.total_deductions:,.2f}  net {s.total_net_pay:,.2f}")


if __name__ == "__main__":
    main()
