from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from ..core.constants import DEFAULT_SEARCH_LIMIT
from ..core.enums import SearchField
from ..employees.repository import EmployeeRepository
from .model import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


def merge_unique(batches: Sequence[Sequence[Project]], *, limit: int) -> List[Project]:
    """Union result batches in order, dropping repeated project ids."""
    seen: set[int] = set()
    out: List[Project] = []
    for batch in batches:
        for project in batch:
            if project.project_id in seen:
                continue
            seen.add(project.project_id)
            out.append(project)
            if len(out) >= limit:
                return out
    return out


class ProjectSearchService:
    """Global search box: several independent lookups, deduplicated client-side.

    No ranking; results keep the order of the lookups (client name, client
    org, project code, assigned employee).
    """

    def __init__(
        self,
        projects: ProjectRepository,
        employees: EmployeeRepository,
        *,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ):
        self._projects = projects
        self._employees = employees
        self._limit = int(limit)

    def _run(self, label: str, lookup: Callable[[], Sequence[Project]]) -> Sequence[Project]:
        try:
            return lookup()
        except Exception:
            logger.exception("Error searching by %s", label)
            return []

    def _by_employee(self, term: str) -> Sequence[Project]:
        needle = term.lower()
        employee_ids = [e.employee_id for e in self._employees.list_all() if needle in e.full_name.lower()]
        if not employee_ids:
            return []
        return self._projects.list_by_assignees(employee_ids=employee_ids, limit=self._limit)

    def search(self, term: str) -> List[Project]:
        term = (term or "").strip()
        if not term:
            return []

        batches = [
            self._run(
                "client name",
                lambda: self._projects.search_field(field=SearchField.CLIENT_NAME, term=term, limit=self._limit),
            ),
            self._run(
                "organization",
                lambda: self._projects.search_field(field=SearchField.CLIENT_ORG, term=term, limit=self._limit),
            ),
            self._run(
                "project ID",
                lambda: self._projects.search_field(
                    field=SearchField.PROJECT_CODE, term=term.upper(), limit=self._limit
                ),
            ),
            self._run("employee", lambda: self._by_employee(term)),
        ]
        results = merge_unique(batches, limit=self._limit)
        logger.info("Search %r matched %d project(s)", term, len(results))
        return results
