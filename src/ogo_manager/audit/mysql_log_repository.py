from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import LogEntry
from .repository import LogRepository


class MySQLLogRepository(LogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, *, admin_id: Optional[int], admin_email: str, action: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO log(admin_id, admin_email, action) VALUES(%s,%s,%s)",
                (admin_id, admin_email, action),
            )
            return int(cur.lastrowid)

    def list_recent(self, *, limit: int) -> Sequence[LogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, admin_id, admin_email, action, created_at
                FROM log
                ORDER BY created_at DESC, log_id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                LogEntry(
                    log_id=int(r["log_id"]),
                    admin_id=int(r["admin_id"]) if r.get("admin_id") is not None else None,
                    admin_email=r.get("admin_email") or "",
                    action=r["action"],
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
