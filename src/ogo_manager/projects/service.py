from __future__ import annotations

import logging
import re
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ..common.validators import optional_text, require_max_length, require_non_empty
from ..core.constants import FIRST_PROJECT_NUMBER, MAX_CLIENT_LENGTH, PROJECT_CODE_PATTERN, PROJECT_CODE_PREFIX
from ..core.enums import ProjectSort, ProjectStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..project_types.repository import ProjectTypeRepository
from .model import Project, ProjectData, ProjectQuery
from .repository import ProjectRepository

logger = logging.getLogger(__name__)

_CODE_RE = re.compile(PROJECT_CODE_PATTERN)

_EDITABLE = {
    "project_code",
    "client_name",
    "client_uni_org",
    "type_ids",
    "deadline_date",
    "price",
    "advance",
    "assigned_to",
    "payment_of_emp",
    "status",
    "fast_deliver",
}


def natural_key(value: str) -> Tuple[Tuple[int, Any], ...]:
    """Sort key comparing digit runs as numbers ('PJ999' < 'PJ1000')."""
    parts = re.split(r"(\d+)", value or "")
    return tuple((0, int(p)) if p.isdigit() else (1, p.lower()) for p in parts if p)


def next_code_after(codes: Iterable[str]) -> str:
    numbers = [int(code[len(PROJECT_CODE_PREFIX):]) for code in codes if code and _CODE_RE.match(code)]
    if not numbers:
        return f"{PROJECT_CODE_PREFIX}{FIRST_PROJECT_NUMBER}"
    return f"{PROJECT_CODE_PREFIX}{max(numbers) + 1}"


def matches_period(project: Project, *, month: Optional[int], year: Optional[int]) -> bool:
    if month is None and year is None:
        return True
    if project.created_at is None:
        return False
    if month is not None and project.created_at.month != month:
        return False
    if year is not None and project.created_at.year != year:
        return False
    return True


def matches_text(project: Project, text: str, employees_by_id: Dict[int, Employee]) -> bool:
    needle = text.strip().lower()
    if not needle:
        return True
    employee = employees_by_id.get(project.assigned_to) if project.assigned_to is not None else None
    haystacks = [project.client_name, project.client_uni_org, employee.full_name if employee else ""]
    return any(needle in (h or "").lower() for h in haystacks)


def sort_projects(projects: Sequence[Project], sort: ProjectSort) -> List[Project]:
    if sort in (ProjectSort.CODE_ASC, ProjectSort.CODE_DESC):
        return sorted(
            projects,
            key=lambda p: natural_key(p.project_code),
            reverse=sort == ProjectSort.CODE_DESC,
        )

    dated = [p for p in projects if p.deadline_date is not None]
    undated = [p for p in projects if p.deadline_date is None]
    dated.sort(key=lambda p: p.deadline_date, reverse=sort == ProjectSort.DEADLINE_DESC)
    return dated + undated


class ProjectService:
    """Use case: manage client projects."""

    def __init__(
        self,
        projects: ProjectRepository,
        employees: EmployeeRepository,
        types: ProjectTypeRepository,
    ):
        self._projects = projects
        self._employees = employees
        self._types = types

    def list_projects(self, query: Optional[ProjectQuery] = None) -> List[Project]:
        query = query or ProjectQuery()
        employees_by_id = {e.employee_id: e for e in self._employees.list_all()}

        out = [
            p
            for p in self._projects.list_all()
            if (query.status is None or p.status == query.status)
            and matches_period(p, month=query.month, year=query.year)
            and matches_text(p, query.text, employees_by_id)
        ]
        return sort_projects(out, query.sort)

    def get_project(self, project_id: int) -> Project:
        project = self._projects.get_by_id(int(project_id))
        if not project:
            raise NotFoundError("Project not found")
        return project

    def next_project_code(self) -> str:
        return next_code_after(self._projects.list_codes())

    def _clean(self, data: ProjectData, *, current_id: Optional[int] = None) -> ProjectData:
        code = (data.project_code or "").strip().upper()
        if not _CODE_RE.match(code):
            raise ValidationError(
                "Project ID must start with PJ and be followed by 4 to 14 digits (e.g., PJ1000)"
            )
        existing = self._projects.get_by_code(code)
        if existing and existing.project_id != current_id:
            raise ValidationError("Project ID already exists")

        try:
            status = ProjectStatus(data.status)
        except ValueError:
            raise ValidationError("Status is not valid")

        for label, amount in (("Price", data.price), ("Advance", data.advance), ("Employee payment", data.payment_of_emp)):
            if not isinstance(amount, Decimal):
                raise ValidationError(f"{label} must be a number")
            if amount < 0:
                raise ValidationError(f"{label} cannot be negative")

        assigned_to = data.assigned_to
        if assigned_to is not None and not self._employees.get_by_id(int(assigned_to)):
            raise ValidationError("Assigned employee does not exist")

        type_ids: List[int] = []
        for type_id in data.type_ids:
            if int(type_id) not in type_ids:
                type_ids.append(int(type_id))
        if type_ids:
            known = {t.type_id for t in self._types.list_all()}
            missing = [str(t) for t in type_ids if t not in known]
            if missing:
                raise ValidationError(f"Unknown project type: {', '.join(missing)}")

        return ProjectData(
            project_code=code,
            client_name=require_max_length(require_non_empty(data.client_name, "Client name"), "Client name", MAX_CLIENT_LENGTH),
            client_uni_org=require_max_length(optional_text(data.client_uni_org), "University/Organization", MAX_CLIENT_LENGTH),
            type_ids=tuple(type_ids),
            deadline_date=data.deadline_date,
            price=data.price,
            advance=data.advance,
            assigned_to=int(assigned_to) if assigned_to is not None else None,
            payment_of_emp=data.payment_of_emp,
            status=status,
            fast_deliver=bool(data.fast_deliver),
        )

    def create_project(
        self,
        *,
        project_code: str,
        client_name: str,
        client_uni_org: str = "",
        type_ids: Iterable[int] = (),
        deadline_date: Optional[date] = None,
        price: Decimal = Decimal("0"),
        advance: Decimal = Decimal("0"),
        assigned_to: Optional[int] = None,
        payment_of_emp: Decimal = Decimal("0"),
        status: ProjectStatus = ProjectStatus.PENDING,
        fast_deliver: bool = False,
    ) -> int:
        data = self._clean(
            ProjectData(
                project_code=project_code,
                client_name=client_name,
                client_uni_org=client_uni_org,
                type_ids=tuple(type_ids),
                deadline_date=deadline_date,
                price=price,
                advance=advance,
                assigned_to=assigned_to,
                payment_of_emp=payment_of_emp,
                status=status,
                fast_deliver=fast_deliver,
            )
        )
        project_id = self._projects.create(data=data)
        logger.info("Created project %s (%s) assigned_to=%s", project_id, data.project_code, data.assigned_to)
        return project_id

    def update_project(self, project_id: int, **changes: Any) -> Project:
        unknown = set(changes) - _EDITABLE
        if unknown:
            raise ValidationError(f"Unknown project fields: {', '.join(sorted(unknown))}")
        if "type_ids" in changes:
            changes["type_ids"] = tuple(changes["type_ids"] or ())

        current = self.get_project(project_id)
        data = self._clean(replace(current.to_data(), **changes), current_id=current.project_id)
        if not self._projects.update(current.project_id, data=data):
            raise NotFoundError("Project not found")
        return self.get_project(current.project_id)

    def delete_project(self, project_id: int) -> None:
        if not self._projects.delete_by_id(int(project_id)):
            raise NotFoundError("Project not found")
        logger.info("Deleted project %s", project_id)
