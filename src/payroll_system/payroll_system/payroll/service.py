from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.aggregator import AttendanceEarnings, aggregate_attendance
from ..attendance.deductions import late_deduction, undertime_deduction
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_period
from ..common.validators import require_period, require_positive_id
from ..core.constants import DEFAULT_ROSTER_MAX_WORKERS
from ..core.enums import DeductionType
from ..core.exceptions import DataSourceUnavailableError, DomainError, PayrollCalculationError
from ..deductions.model import DeductionRecord
from ..deductions.repository import DeductionRepository, UnavailableDeductionRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..leave.calculator import UnpaidLeave, calculate_unpaid_leave
from ..leave.repository import LeaveRepository, UnavailableLeaveRepository
from ..overtime.calculator import OvertimePay, calculate_overtime
from ..overtime.repository import OvertimeRepository, UnavailableOvertimeRepository
from . import rates
from .calculator.base import ContributionCalculator, Contributions
from .calculator.standard_calculator import StandardContributionCalculator
from .model import PayrollResult, RosterEntry

logger = logging.getLogger(__name__)

_DEDUCTION_LABELS = {
    DeductionType.LATE: "Late arrival",
    DeductionType.UNDERTIME: "Undertime",
    DeductionType.UNPAID_LEAVE: "Unpaid leave",
}


class PayrollService:
    """Use case: compute an employee's payroll for a period.

    Employee and attendance data are required. Overtime, leave and the deduction sink are
    optional: when one is missing or unreachable its contribution is zero and a warning is
    logged. The service keeps no per-calculation state, so one instance can serve many
    threads.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        overtime: Optional[OvertimeRepository] = None,
        leave: Optional[LeaveRepository] = None,
        deductions: Optional[DeductionRepository] = None,
        *,
        contributions: Optional[ContributionCalculator] = None,
        max_workers: int = DEFAULT_ROSTER_MAX_WORKERS,
    ):
        self._employees = employees
        self._attendance = attendance
        self._overtime = overtime or UnavailableOvertimeRepository()
        self._leave = leave or UnavailableLeaveRepository()
        self._deductions = deductions or UnavailableDeductionRepository()
        self._contributions = contributions or StandardContributionCalculator()
        self._max_workers = max(1, int(max_workers))

    def calculate(self, employee_id: int, period_start: date, period_end: date) -> PayrollResult:
        try:
            return self._calculate(employee_id, period_start, period_end)
        except PayrollCalculationError as exc:
            logger.error("Failed to calculate payroll for employee %s: %s", employee_id, exc)
            raise
        except (DomainError, DataSourceUnavailableError) as exc:
            logger.exception("Failed to calculate payroll for employee %s", employee_id)
            raise PayrollCalculationError(f"Failed to calculate payroll: {exc}") from exc
        except Exception as exc:
            logger.exception("Unexpected error calculating payroll for employee %s", employee_id)
            raise PayrollCalculationError(f"Failed to calculate payroll: {exc}") from exc

    def calculate_roster(
        self,
        employee_ids: Iterable[int],
        period_start: date,
        period_end: date,
    ) -> list[RosterEntry]:
        """Run independent calculations on a worker pool; one failure never stops the others."""

        ids = list(employee_ids)
        if not ids:
            return []

        def run(employee_id: int) -> RosterEntry:
            try:
                return RosterEntry(employee_id=employee_id, payroll=self.calculate(employee_id, period_start, period_end))
            except PayrollCalculationError as exc:
                return RosterEntry(employee_id=employee_id, error=str(exc))

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(ids))) as pool:
            return list(pool.map(run, ids))

    def calculate_month(self, year: int, month: int) -> list[RosterEntry]:
        start, end = month_period(year, month)
        try:
            employees = self._employees.list_all()
        except DataSourceUnavailableError as exc:
            raise PayrollCalculationError(f"Cannot load employee roster: {exc}") from exc
        return self.calculate_roster([e.employee_id for e in employees], start, end)

    def _calculate(self, employee_id: int, period_start: date, period_end: date) -> PayrollResult:
        employee_id = require_positive_id(employee_id, "employee ID")
        period_start, period_end = require_period(period_start, period_end)

        employee = self._get_employee(employee_id)
        monthly_salary = employee.basic_salary
        daily = rates.daily_rate(monthly_salary)
        hourly = rates.hourly_rate(daily)

        records = self._load_attendance(employee_id, period_start, period_end)
        earnings = aggregate_attendance(records, daily)
        logger.info(
            "Employee %s attendance: %d records, %d valid days, %.2f hours, basic pay %.2f",
            employee_id, len(records), earnings.days_worked, earnings.total_work_hours, earnings.gross_earnings,
        )

        overtime = self._calculate_overtime(employee_id, period_start, period_end, hourly)

        logger.info(
            "Employee %s allowances - Rice: %.2f, Phone: %.2f, Clothing: %.2f",
            employee_id, employee.rice_subsidy, employee.phone_allowance, employee.clothing_allowance,
        )

        late = late_deduction(records, hourly)
        undertime = undertime_deduction(records, hourly)
        unpaid = self._calculate_unpaid_leave(employee_id, period_start, period_end, daily)
        self._save_deductions(
            employee_id,
            period_start,
            period_end,
            {
                DeductionType.LATE: late,
                DeductionType.UNDERTIME: undertime,
                DeductionType.UNPAID_LEAVE: unpaid.deduction,
            },
        )
        logger.info(
            "Employee %s deductions - Late: %.2f, Undertime: %.2f, Unpaid Leave: %.2f",
            employee_id, late, undertime, unpaid.deduction,
        )

        contrib = self._contributions.calculate(monthly_salary)
        logger.info(
            "Employee %s contributions - SSS: %.2f, PhilHealth: %.2f, Pag-IBIG: %.2f, Tax: %.2f",
            employee_id, contrib.sss, contrib.philhealth, contrib.pagibig, contrib.tax,
        )

        result = self._assemble(
            employee, period_start, period_end, daily, hourly, earnings, overtime, late, undertime, unpaid, contrib
        )
        self._validate(result)

        logger.info(
            "Payroll for employee %s %s (%s to %s): days worked %d, gross %.2f, deductions %.2f, net %.2f",
            employee_id, employee.full_name, period_start, period_end, result.days_worked,
            result.gross_pay, result.total_deductions, result.net_pay,
        )
        return result

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise PayrollCalculationError(f"Employee not found with ID: {employee_id}")
        if employee.basic_salary <= 0:
            raise PayrollCalculationError(f"Employee {employee_id} has invalid basic salary")
        return employee

    def _load_attendance(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        try:
            return list(self._attendance.get_for_employee_between(employee_id, start_date=start, end_date=end))
        except DataSourceUnavailableError as exc:
            raise PayrollCalculationError(f"Failed to calculate attendance-based earnings: {exc}") from exc

    def _calculate_overtime(self, employee_id: int, start: date, end: date, hourly: float) -> OvertimePay:
        try:
            records = self._overtime.get_for_employee_between(employee_id, start_date=start, end_date=end)
        except DataSourceUnavailableError as exc:
            logger.warning("Overtime data unavailable for employee %s, overtime pay set to 0: %s", employee_id, exc)
            return OvertimePay()

        overtime = calculate_overtime(records, hourly)
        logger.info("Employee %s overtime: %.2f hours, pay: %.2f", employee_id, overtime.total_hours, overtime.pay)
        return overtime

    def _calculate_unpaid_leave(self, employee_id: int, start: date, end: date, daily: float) -> UnpaidLeave:
        try:
            records = self._leave.get_approved_for_employee_between(employee_id, start_date=start, end_date=end)
        except DataSourceUnavailableError as exc:
            logger.warning("Leave data unavailable for employee %s, unpaid leave set to 0: %s", employee_id, exc)
            return UnpaidLeave()

        unpaid = calculate_unpaid_leave(records, daily)
        logger.info("Employee %s unpaid leave: %d days, deduction: %.2f", employee_id, unpaid.days, unpaid.deduction)
        return unpaid

    def _save_deductions(self, employee_id: int, start: date, end: date, amounts: dict[DeductionType, float]) -> None:
        for kind, amount in amounts.items():
            if amount <= 0:
                continue
            record = DeductionRecord(
                employee_id=employee_id,
                deduction_type=kind,
                amount=amount,
                description=f"{_DEDUCTION_LABELS[kind]} deduction for period {start} to {end}",
                deduction_date=end,
            )
            try:
                self._deductions.add(record)
            except DataSourceUnavailableError as exc:
                logger.warning("Could not save %s deduction for employee %s: %s", kind.value, employee_id, exc)

    @staticmethod
    def _assemble(
        employee: Employee,
        start: date,
        end: date,
        daily: float,
        hourly: float,
        earnings: AttendanceEarnings,
        overtime: OvertimePay,
        late: float,
        undertime: float,
        unpaid: UnpaidLeave,
        contrib: Contributions,
    ) -> PayrollResult:
        gross_pay = earnings.gross_earnings + overtime.pay + employee.total_allowances
        total_deductions = contrib.sss + contrib.philhealth + contrib.pagibig + contrib.tax + late + undertime + unpaid.deduction

        return PayrollResult(
            employee_id=employee.employee_id,
            period_start=start,
            period_end=end,
            monthly_rate=employee.basic_salary,
            daily_rate=daily,
            hourly_rate=hourly,
            days_worked=earnings.days_worked,
            total_work_hours=earnings.total_work_hours,
            gross_earnings=earnings.gross_earnings,
            total_overtime_hours=overtime.total_hours,
            overtime_pay=overtime.pay,
            rice_subsidy=employee.rice_subsidy,
            phone_allowance=employee.phone_allowance,
            clothing_allowance=employee.clothing_allowance,
            late_deduction=late,
            undertime_deduction=undertime,
            unpaid_leave_days=unpaid.days,
            unpaid_leave_deduction=unpaid.deduction,
            sss=contrib.sss,
            philhealth=contrib.philhealth,
            pagibig=contrib.pagibig,
            tax=contrib.tax,
            gross_pay=gross_pay,
            total_deductions=total_deductions,
            net_pay=gross_pay - total_deductions,
        )

    @staticmethod
    def _validate(result: PayrollResult) -> None:
        if result.gross_pay < 0:
            raise PayrollCalculationError("Gross pay cannot be negative")
        if result.total_deductions < 0:
            raise PayrollCalculationError("Total deductions cannot be negative")
        if result.net_pay < 0:
            logger.warning("Negative net pay detected for employee %s: %.2f", result.employee_id, result.net_pay)
