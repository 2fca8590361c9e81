from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from ..core.enums import ProjectStatus, SearchField
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetchall,
    fetchone,
    like_pattern,
    placeholders,
    split_ids,
    to_date,
    to_decimal,
)
from .model import Project, ProjectData
from .repository import ProjectRepository

_SELECT = """
    SELECT p.project_id, p.project_code, p.client_name, p.client_uni_org,
           p.deadline_date, p.price, p.advance, p.assigned_to, p.payment_of_emp,
           p.status, p.fast_deliver, p.created_at, p.updated_at,
           GROUP_CONCAT(l.type_id ORDER BY l.position SEPARATOR ',') AS type_ids
    FROM projects p
    LEFT JOIN project_type_links l ON l.project_id = p.project_id
"""

_GROUP = " GROUP BY p.project_id "

_SEARCH_COLUMNS = {
    SearchField.CLIENT_NAME: "p.client_name",
    SearchField.CLIENT_ORG: "p.client_uni_org",
    SearchField.PROJECT_CODE: "p.project_code",
}


def _row_to_project(r: Dict[str, Any]) -> Project:
    assigned = r.get("assigned_to")
    return Project(
        project_id=int(r["project_id"]),
        project_code=r["project_code"],
        client_name=r["client_name"],
        client_uni_org=r.get("client_uni_org") or "",
        type_ids=split_ids(r.get("type_ids")),
        deadline_date=to_date(r.get("deadline_date")),
        price=to_decimal(r.get("price")),
        advance=to_decimal(r.get("advance")),
        assigned_to=int(assigned) if assigned is not None else None,
        payment_of_emp=to_decimal(r.get("payment_of_emp")),
        status=ProjectStatus(r["status"]),
        fast_deliver=bool(r.get("fast_deliver")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _params(data: ProjectData) -> tuple:
    return (
        data.project_code,
        data.client_name,
        data.client_uni_org,
        data.deadline_date,
        data.price,
        data.advance,
        data.assigned_to,
        data.payment_of_emp,
        data.status.value,
        1 if data.fast_deliver else 0,
    )


def _write_links(cur, project_id: int, type_ids: Sequence[int]) -> None:
    cur.execute("DELETE FROM project_type_links WHERE project_id=%s", (project_id,))
    if type_ids:
        cur.executemany(
            "INSERT INTO project_type_links(project_id, type_id, position) VALUES(%s,%s,%s)",
            [(project_id, int(type_id), position) for position, type_id in enumerate(type_ids)],
        )


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + _GROUP + "ORDER BY p.created_at DESC, p.project_id DESC")
            return [_row_to_project(r) for r in fetchall(cur)]

    def get_by_id(self, project_id: int) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + "WHERE p.project_id=%s" + _GROUP, (int(project_id),))
            r = fetchone(cur)
            return _row_to_project(r) if r else None

    def get_by_code(self, project_code: str) -> Optional[Project]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + "WHERE p.project_code=%s" + _GROUP, (project_code,))
            r = fetchone(cur)
            return _row_to_project(r) if r else None

    def list_codes(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT project_code FROM projects")
            return [r["project_code"] for r in fetchall(cur)]

    def create(self, *, data: ProjectData) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO projects(
                    project_code, client_name, client_uni_org, deadline_date, price, advance,
                    assigned_to, payment_of_emp, status, fast_deliver
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(data),
            )
            project_id = int(cur.lastrowid)
            _write_links(cur, project_id, data.type_ids)
            return project_id

    def update(self, project_id: int, *, data: ProjectData) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM projects WHERE project_id=%s", (int(project_id),))
            if fetchone(cur) is None:
                return False
            cur.execute(
                """
                UPDATE projects
                SET project_code=%s, client_name=%s, client_uni_org=%s, deadline_date=%s,
                    price=%s, advance=%s, assigned_to=%s, payment_of_emp=%s, status=%s, fast_deliver=%s
                WHERE project_id=%s
                """,
                _params(data) + (int(project_id),),
            )
            _write_links(cur, int(project_id), data.type_ids)
            return True

    def delete_by_id(self, project_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM projects WHERE project_id=%s", (int(project_id),))
            return cur.rowcount > 0

    def search_field(self, *, field: SearchField, term: str, limit: int) -> Sequence[Project]:
        column = _SEARCH_COLUMNS[field]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f"WHERE {column} LIKE %s" + _GROUP + "ORDER BY p.created_at DESC LIMIT %s",
                (like_pattern(term), int(limit)),
            )
            return [_row_to_project(r) for r in fetchall(cur)]

    def list_by_assignees(self, *, employee_ids: Iterable[int], limit: int) -> Sequence[Project]:
        ids = [int(i) for i in employee_ids]
        if not ids:
            return []
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + f"WHERE p.assigned_to IN ({placeholders(len(ids))})"
                + _GROUP
                + "ORDER BY p.created_at DESC LIMIT %s",
                tuple(ids) + (int(limit),),
            )
            return [_row_to_project(r) for r in fetchall(cur)]
