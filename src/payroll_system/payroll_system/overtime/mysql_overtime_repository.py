from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall
from .model import OvertimeRecord
from .repository import OvertimeRepository


class MySQLOvertimeRepository(OvertimeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[OvertimeRecord]:
        # An overtime request belongs to the period when it overlaps it.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT overtime_id, employee_id, start_date, end_date, hours, approved
                FROM overtime
                WHERE employee_id=%s AND start_date <= %s AND end_date >= %s
                """,
                (int(employee_id), end_date, start_date),
            )
            return [
                OvertimeRecord(
                    overtime_id=int(r["overtime_id"]),
                    employee_id=int(r["employee_id"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    hours=as_float(r["hours"]),
                    approved=bool(r["approved"]),
                )
                for r in fetchall(cur)
            ]
