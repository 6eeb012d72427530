from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.constants import EMPLOYEE_ID_PREFIX
from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeDirectory


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        name=row["name"],
        status=EmployeeStatus(row["status"]),
        fingerprint_id=row.get("fingerprint_id"),
    )


class MySQLEmployeeDirectory(EmployeeDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, fingerprint_id, status
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, fingerprint_id, status
                FROM employees
                ORDER BY created_at, employee_id
                """
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def create(self, *, name: str, status: EmployeeStatus, fingerprint_id: Optional[str] = None) -> Employee:
        employee_id = f"{EMPLOYEE_ID_PREFIX}{uuid.uuid4().hex[:12]}"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, fingerprint_id, status)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_id, name, fingerprint_id, status.value),
            )
        return Employee(employee_id=employee_id, name=name, status=status, fingerprint_id=fingerprint_id)

    def set_status(self, employee_id: str, *, status: EmployeeStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET status=%s WHERE employee_id=%s", (status.value, employee_id))
            return cur.rowcount > 0

    def set_fingerprint(self, employee_id: str, *, fingerprint_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET fingerprint_id=%s WHERE employee_id=%s",
                (fingerprint_id, employee_id),
            )
            return cur.rowcount > 0

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
