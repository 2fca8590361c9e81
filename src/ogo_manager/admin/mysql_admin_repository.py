from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Admin
from .repository import AdminRepository


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT admin_id, email, password_hash FROM admin WHERE admin_id=%s", (int(admin_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Admin(admin_id=int(r["admin_id"]), email=r["email"], password_hash=r["password_hash"])

    def get_by_email(self, email: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT admin_id, email, password_hash FROM admin WHERE email=%s", (email,))
            r = fetchone(cur)
            if not r:
                return None
            return Admin(admin_id=int(r["admin_id"]), email=r["email"], password_hash=r["password_hash"])

    def list_all(self) -> Sequence[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT admin_id, email, password_hash FROM admin ORDER BY admin_id")
            return [
                Admin(admin_id=int(r["admin_id"]), email=r["email"], password_hash=r["password_hash"])
                for r in fetchall(cur)
            ]

    def set_password_hash(self, admin_id: int, *, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE admin SET password_hash=%s WHERE admin_id=%s", (password_hash, int(admin_id)))
            return cur.rowcount > 0
