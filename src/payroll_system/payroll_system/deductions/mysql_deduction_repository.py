from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import DeductionRecord
from .repository import DeductionRepository


class MySQLDeductionRepository(DeductionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, record: DeductionRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO deductions(employee_id, deduction_type, amount, description, deduction_date)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    record.employee_id,
                    record.deduction_type.value,
                    round(record.amount, 2),
                    record.description,
                    record.deduction_date,
                ),
            )
            return int(cur.lastrowid)
