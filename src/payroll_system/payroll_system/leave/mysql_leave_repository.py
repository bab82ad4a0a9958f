from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LeaveRecord
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_approved_for_employee_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[LeaveRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT leave_id, employee_id, leave_type, start_date, end_date, leave_days, status
                FROM leave_requests
                WHERE employee_id=%s AND status=%s AND start_date <= %s AND end_date >= %s
                ORDER BY start_date ASC
                """,
                (int(employee_id), RequestStatus.APPROVED.value, end_date, start_date),
            )
            return [
                LeaveRecord(
                    leave_id=int(r["leave_id"]),
                    employee_id=int(r["employee_id"]),
                    leave_type=r["leave_type"],
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    leave_days=int(r["leave_days"]),
                    status=RequestStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]
