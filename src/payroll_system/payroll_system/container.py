from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.constants import DEFAULT_ROSTER_MAX_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .deductions.mysql_deduction_repository import MySQLDeductionRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .overtime.mysql_overtime_repository import MySQLOvertimeRepository
from .payroll.report_service import PayrollReportService
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    overtime_repo: MySQLOvertimeRepository
    leave_repo: MySQLLeaveRepository
    deductions_repo: MySQLDeductionRepository

    payroll_service: PayrollService
    payroll_report_service: PayrollReportService


def build_container(*, db_config: dict, max_workers: int = DEFAULT_ROSTER_MAX_WORKERS) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    overtime_repo = MySQLOvertimeRepository(conn)
    leave_repo = MySQLLeaveRepository(conn)
    deductions_repo = MySQLDeductionRepository(conn)

    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        overtime_repo,
        leave_repo,
        deductions_repo,
        max_workers=max_workers,
    )
    payroll_report_service = PayrollReportService(attendance_repo, payroll_service)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        overtime_repo=overtime_repo,
        leave_repo=leave_repo,
        deductions_repo=deductions_repo,
        payroll_service=payroll_service,
        payroll_report_service=payroll_report_service,
    )
