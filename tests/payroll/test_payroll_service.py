from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date, time, timedelta
from typing import Optional

import mysql.connector
import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.enums import DeductionType, RequestStatus
from src.payroll_system.payroll_system.core.exceptions import DataSourceUnavailableError, PayrollCalculationError
from src.payroll_system.payroll_system.deductions.model import DeductionRecord
from src.payroll_system.payroll_system.employees.model import Employee
from src.payroll_system.payroll_system.leave.model import LeaveRecord
from src.payroll_system.payroll_system.overtime.model import OvertimeRecord
from src.payroll_system.payroll_system.overtime.mysql_overtime_repository import MySQLOvertimeRepository
from src.payroll_system.payroll_system.payroll.service import PayrollService


@dataclass
class InMemoryEmployees:
    employees: dict[int, Employee]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def list_all(self):
        return list(self.employees.values())


class InMemoryAttendance:
    def __init__(self, records: list[AttendanceRecord]):
        self._records = records
        self.calls = 0

    def get_for_employee_between(self, employee_id: int, *, start_date: date, end_date: date):
        self.calls += 1
        return [r for r in self._records if r.employee_id == employee_id and start_date <= r.work_date <= end_date]


class BrokenAttendance:
    def get_for_employee_between(self, employee_id: int, *, start_date: date, end_date: date):
        raise DataSourceUnavailableError("connection refused")


@dataclass
class InMemoryOvertime:
    records: list[OvertimeRecord]

    def get_for_employee_between(self, employee_id: int, *, start_date: date, end_date: date):
        return [r for r in self.records if r.employee_id == employee_id]


@dataclass
class InMemoryLeave:
    records: list[LeaveRecord]

    def get_approved_for_employee_between(self, employee_id: int, *, start_date: date, end_date: date):
        return [r for r in self.records if r.employee_id == employee_id and r.status == RequestStatus.APPROVED]


@dataclass
class RecordingDeductions:
    saved: list[DeductionRecord] = field(default_factory=list)
    fail_on: set[DeductionType] = field(default_factory=set)

    def add(self, record: DeductionRecord) -> int:
        if record.deduction_type in self.fail_on:
            raise DataSourceUnavailableError("deductions table locked")
        self.saved.append(record)
        return len(self.saved)


def _employee(employee_id: int = 1, salary: float = 20000, **allowances) -> Employee:
    return Employee(employee_id=employee_id, first_name="Isabella", last_name="Reyes", basic_salary=salary, **allowances)


def _workdays(employee_id: int, start: date, count: int, log_in=time(8, 0), log_out=time(17, 0)) -> list[AttendanceRecord]:
    out = []
    day = start
    while len(out) < count:
        if day.weekday() < 5:
            out.append(
                AttendanceRecord(
                    attendance_id=len(out) + 1, employee_id=employee_id, work_date=day, log_in=log_in, log_out=log_out
                )
            )
        day += timedelta(days=1)
    return out


def test_end_to_end_twenty_days_without_extras(june_period):
    start, end = june_period
    svc = PayrollService(InMemoryEmployees({1: _employee()}), InMemoryAttendance(_workdays(1, start, 20)))

    p = svc.calculate(1, start, end)

    assert p.days_worked == 20
    assert p.daily_rate == pytest.approx(909.09, abs=0.01)
    assert p.gross_earnings == pytest.approx(18181.82, abs=0.01)
    assert (p.sss, p.philhealth, p.pagibig, p.tax) == (720.00, 500.00, 200.00, 0.0)
    assert p.overtime_pay == 0 and p.late_deduction == 0 and p.undertime_deduction == 0
    assert p.unpaid_leave_deduction == 0
    assert p.gross_pay == pytest.approx(18181.82, abs=0.01)
    assert p.total_deductions == pytest.approx(1420.00)
    assert p.net_pay == pytest.approx(16761.82, abs=0.01)
    assert p.gross_pay - p.total_deductions == p.net_pay


def test_full_payroll_with_overtime_allowances_and_deductions(june_period):
    start, end = june_period
    attendance = _workdays(1, start, 18)
    attendance[0] = AttendanceRecord(1, 1, attendance[0].work_date, time(8, 20), time(17, 0))
    attendance[1] = AttendanceRecord(2, 1, attendance[1].work_date, time(8, 0), time(16, 0))
    overtime = [
        OvertimeRecord(1, 1, date(2024, 6, 4), date(2024, 6, 4), hours=4, approved=True),
        OvertimeRecord(2, 1, date(2024, 6, 5), date(2024, 6, 5), hours=9, approved=False),
    ]
    leave = [LeaveRecord(1, 1, "Unpaid", date(2024, 6, 27), date(2024, 6, 28), leave_days=2, status=RequestStatus.APPROVED)]
    sink = RecordingDeductions()

    svc = PayrollService(
        InMemoryEmployees({1: _employee(rice_subsidy=1500, phone_allowance=500, clothing_allowance=500)}),
        InMemoryAttendance(attendance),
        InMemoryOvertime(overtime),
        InMemoryLeave(leave),
        sink,
    )
    p = svc.calculate(1, start, end)

    daily = 20000 / 22
    hourly = daily / 8
    assert p.hourly_rate == hourly
    assert p.days_worked == 18
    assert p.total_overtime_hours == 4
    assert p.overtime_pay == pytest.approx(4 * hourly * 1.25)
    assert p.late_deduction == pytest.approx(20 / 60 * hourly)
    assert p.undertime_deduction == pytest.approx(1 * hourly)
    assert p.unpaid_leave_days == 2
    assert p.unpaid_leave_deduction == pytest.approx(2 * daily)
    assert p.gross_pay == pytest.approx(18 * daily + 4 * hourly * 1.25 + 2500)
    assert p.gross_pay - p.total_deductions == p.net_pay

    saved = {r.deduction_type: r for r in sink.saved}
    assert set(saved) == {DeductionType.LATE, DeductionType.UNDERTIME, DeductionType.UNPAID_LEAVE}
    assert saved[DeductionType.LATE].deduction_date == end
    assert saved[DeductionType.LATE].description == "Late arrival deduction for period 2024-06-01 to 2024-06-30"


def test_zero_deductions_are_not_persisted(june_period):
    start, end = june_period
    sink = RecordingDeductions()
    svc = PayrollService(
        InMemoryEmployees({1: _employee()}), InMemoryAttendance(_workdays(1, start, 5)), deductions=sink
    )

    svc.calculate(1, start, end)

    assert sink.saved == []


def test_failed_deduction_save_is_swallowed(june_period, caplog):
    start, end = june_period
    attendance = _workdays(1, start, 2, log_in=time(9, 0), log_out=time(16, 0))
    sink = RecordingDeductions(fail_on={DeductionType.LATE})
    svc = PayrollService(InMemoryEmployees({1: _employee()}), InMemoryAttendance(attendance), deductions=sink)

    p = svc.calculate(1, start, end)

    assert p.late_deduction > 0
    assert [r.deduction_type for r in sink.saved] == [DeductionType.UNDERTIME]
    assert "Could not save Late deduction" in caplog.text


def test_missing_optional_sources_degrade_to_zero(june_period, caplog):
    start, end = june_period
    svc = PayrollService(InMemoryEmployees({1: _employee()}), InMemoryAttendance(_workdays(1, start, 3)))

    p = svc.calculate(1, start, end)

    assert (p.total_overtime_hours, p.overtime_pay) == (0.0, 0.0)
    assert (p.unpaid_leave_days, p.unpaid_leave_deduction) == (0, 0.0)
    assert "Overtime data unavailable" in caplog.text
    assert "Leave data unavailable" in caplog.text


def test_zero_valid_attendance_is_not_an_error(june_period):
    start, end = june_period
    attendance = _workdays(1, start, 3, log_in=None, log_out=None)
    svc = PayrollService(InMemoryEmployees({1: _employee()}), InMemoryAttendance(attendance))

    p = svc.calculate(1, start, end)

    assert p.days_worked == 0
    assert p.gross_earnings == 0


def test_negative_net_pay_is_allowed(june_period, caplog):
    start, end = june_period
    leave = [LeaveRecord(1, 1, "unpaid", start, end, leave_days=15, status=RequestStatus.APPROVED)]
    svc = PayrollService(
        InMemoryEmployees({1: _employee()}), InMemoryAttendance(_workdays(1, start, 2)), leave=InMemoryLeave(leave)
    )

    p = svc.calculate(1, start, end)

    assert p.net_pay < 0
    assert "Negative net pay" in caplog.text


@pytest.mark.parametrize(
    "employee_id, start, end, message",
    [
        (0, date(2024, 6, 1), date(2024, 6, 30), "Invalid employee ID"),
        (-3, date(2024, 6, 1), date(2024, 6, 30), "Invalid employee ID"),
        (1, None, date(2024, 6, 30), "cannot be null"),
        (1, date(2024, 6, 1), None, "cannot be null"),
        (1, date(2024, 6, 30), date(2024, 6, 1), "before period start"),
    ],
)
def test_invalid_input_rejected_before_data_access(employee_id, start, end, message):
    attendance = InMemoryAttendance([])
    svc = PayrollService(InMemoryEmployees({1: _employee()}), attendance)

    with pytest.raises(PayrollCalculationError, match=message):
        svc.calculate(employee_id, start, end)
    assert attendance.calls == 0


def test_unknown_employee_fails(june_period):
    svc = PayrollService(InMemoryEmployees({}), InMemoryAttendance([]))

    with pytest.raises(PayrollCalculationError, match="Employee not found with ID: 7"):
        svc.calculate(7, *june_period)


def test_zero_salary_fails(june_period):
    svc = PayrollService(InMemoryEmployees({1: _employee(salary=0)}), InMemoryAttendance([]))

    with pytest.raises(PayrollCalculationError, match="invalid basic salary"):
        svc.calculate(1, *june_period)


def test_attendance_source_failure_is_fatal(june_period):
    svc = PayrollService(InMemoryEmployees({1: _employee()}), BrokenAttendance())

    with pytest.raises(PayrollCalculationError, match="attendance-based earnings"):
        svc.calculate(1, *june_period)


def test_single_day_period_is_valid():
    day = date(2024, 6, 3)
    svc = PayrollService(InMemoryEmployees({1: _employee()}), InMemoryAttendance(_workdays(1, day, 1)))

    assert svc.calculate(1, day, day).days_worked == 1


def test_roster_keeps_order_and_reports_failures(june_period):
    start, end = june_period
    employees = {i: _employee(employee_id=i, salary=10000 * i) for i in range(1, 6)}
    employees[4] = _employee(employee_id=4, salary=0)
    attendance = [r for i in range(1, 6) for r in _workdays(i, start, 10 + i)]
    svc = PayrollService(InMemoryEmployees(employees), InMemoryAttendance(attendance), max_workers=3)

    entries = svc.calculate_roster([5, 4, 3, 2, 1, 99], start, end)

    assert [e.employee_id for e in entries] == [5, 4, 3, 2, 1, 99]
    assert [e.ok for e in entries] == [True, False, True, True, True, False]
    assert entries[0].payroll.days_worked == 15
    assert "invalid basic salary" in entries[1].error
    assert "Employee not found" in entries[5].error


def test_unexpected_error_is_wrapped_and_roster_continues(june_period):
    start, end = june_period

    class GarbledAttendance(InMemoryAttendance):
        def get_for_employee_between(self, employee_id, *, start_date, end_date):
            if employee_id == 2:
                raise ValueError("Invalid time string: '8'")
            return super().get_for_employee_between(employee_id, start_date=start_date, end_date=end_date)

    employees = {i: _employee(employee_id=i) for i in (1, 2, 3)}
    attendance = GarbledAttendance([r for i in employees for r in _workdays(i, start, 20)])
    svc = PayrollService(InMemoryEmployees(employees), attendance)

    with pytest.raises(PayrollCalculationError, match="Invalid time string"):
        svc.calculate(2, start, end)

    entries = svc.calculate_roster([1, 2, 3], start, end)

    assert [e.ok for e in entries] == [True, False, True]
    assert "Failed to calculate payroll" in entries[1].error


class DroppedCursor:
    def execute(self, sql, params=None):
        raise mysql.connector.errors.OperationalError("MySQL Connection not available")

    def close(self):
        pass


class DroppedConnection:
    def cursor(self, dictionary=True):
        return DroppedCursor()

    def commit(self):
        pass

    def rollback(self):
        raise mysql.connector.errors.OperationalError("MySQL Connection not available")

    def close(self):
        pass


class DroppedConnectionFactory:
    def connect(self):
        return DroppedConnection()


def test_dropped_overtime_connection_degrades_to_zero(june_period, caplog):
    start, end = june_period
    svc = PayrollService(
        InMemoryEmployees({1: _employee()}),
        InMemoryAttendance(_workdays(1, start, 20)),
        overtime=MySQLOvertimeRepository(DroppedConnectionFactory()),
    )

    p = svc.calculate(1, start, end)

    assert p.overtime_pay == 0 and p.total_overtime_hours == 0
    assert "Overtime data unavailable" in caplog.text

def test_roster_runs_calculations_on_worker_threads(june_period):
    start, end = june_period
    seen: set[str] = set()

    class ThreadRecordingAttendance(InMemoryAttendance):
        def get_for_employee_between(self, employee_id, *, start_date, end_date):
            seen.add(threading.current_thread().name)
            return super().get_for_employee_between(employee_id, start_date=start_date, end_date=end_date)

    employees = {i: _employee(employee_id=i) for i in range(1, 9)}
    attendance = ThreadRecordingAttendance([r for i in employees for r in _workdays(i, start, 20)])
    svc = PayrollService(InMemoryEmployees(employees), attendance, max_workers=4)

    entries = svc.calculate_roster(list(employees), start, end)

    assert all(e.ok for e in entries)
    assert {e.payroll.net_pay for e in entries} == {entries[0].payroll.net_pay}
    assert threading.current_thread().name not in seen


def test_calculate_month_uses_calendar_month():
    svc = PayrollService(InMemoryEmployees({1: _employee()}), InMemoryAttendance(_workdays(1, date(2024, 2, 1), 21)))

    entries = svc.calculate_month(2024, 2)

    assert entries[0].payroll.period_start == date(2024, 2, 1)
    assert entries[0].payroll.period_end == date(2024, 2, 29)
    assert entries[0].payroll.days_worked == 21
