from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ProjectType
from .repository import ProjectTypeRepository


class MySQLProjectTypeRepository(ProjectTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ProjectType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT type_id, name, created_at FROM project_types ORDER BY created_at, type_id")
            return [
                ProjectType(type_id=int(r["type_id"]), name=r["name"], created_at=r.get("created_at"))
                for r in fetchall(cur)
            ]

    def get_by_id(self, type_id: int) -> Optional[ProjectType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT type_id, name, created_at FROM project_types WHERE type_id=%s", (int(type_id),))
            r = fetchone(cur)
            if not r:
                return None
            return ProjectType(type_id=int(r["type_id"]), name=r["name"], created_at=r.get("created_at"))

    def get_by_name(self, name: str) -> Optional[ProjectType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT type_id, name, created_at FROM project_types WHERE name=%s", (name,))
            r = fetchone(cur)
            if not r:
                return None
            return ProjectType(type_id=int(r["type_id"]), name=r["name"], created_at=r.get("created_at"))

    def create(self, *, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO project_types(name) VALUES(%s)", (name,))
            return int(cur.lastrowid)

    def rename(self, type_id: int, *, name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE project_types SET name=%s WHERE type_id=%s", (name, int(type_id)))
            return cur.rowcount > 0

    def delete(self, type_id: int) -> bool:
        # project_type_links rows go with it (ON DELETE CASCADE).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM project_types WHERE type_id=%s", (int(type_id),))
            return cur.rowcount > 0
