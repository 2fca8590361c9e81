from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, employee_code, first_name, last_name, birthday, position,
    address, whatsapp, email, qualifications, created_at
"""


def _row_to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        employee_code=r["employee_code"],
        first_name=r["first_name"],
        last_name=r["last_name"],
        birthday=to_date(r.get("birthday")),
        position=r.get("position") or "",
        address=r.get("address") or "",
        whatsapp=r.get("whatsapp") or "",
        email=r.get("email") or "",
        qualifications=r.get("qualifications") or "",
        created_at=r.get("created_at"),
    )


def _params(data: EmployeeData) -> tuple:
    return (
        data.employee_code,
        data.first_name,
        data.last_name,
        data.birthday,
        data.position,
        data.address,
        data.whatsapp,
        data.email,
        data.qualifications,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC, employee_id DESC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_code=%s", (employee_code,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def create(self, *, data: EmployeeData) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    employee_code, first_name, last_name, birthday, position,
                    address, whatsapp, email, qualifications
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(data),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, *, data: EmployeeData) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET employee_code=%s, first_name=%s, last_name=%s, birthday=%s, position=%s,
                    address=%s, whatsapp=%s, email=%s, qualifications=%s
                WHERE employee_id=%s
                """,
                _params(data) + (int(employee_id),),
            )
            # rowcount is 0 when nothing changed, so confirm existence separately.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 FROM employees WHERE employee_id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def ping(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id FROM employees LIMIT 1")
            fetchall(cur)
