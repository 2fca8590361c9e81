from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import SearchField
from .model import Project, ProjectData


class ProjectRepository(Protocol):
    """Repository interface for Project.

    type_ids are persisted as ordered links, never as a delimited string.
    """

    def list_all(self) -> Sequence[Project]:
        """All projects, newest first."""

        raise NotImplementedError

    def get_by_id(self, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def get_by_code(self, project_code: str) -> Optional[Project]:
        raise NotImplementedError

    def list_codes(self) -> Sequence[str]:
        raise NotImplementedError

    def create(self, *, data: ProjectData) -> int:
        raise NotImplementedError

    def update(self, project_id: int, *, data: ProjectData) -> bool:
        raise NotImplementedError

    def delete_by_id(self, project_id: int) -> bool:
        raise NotImplementedError

    def search_field(self, *, field: SearchField, term: str, limit: int) -> Sequence[Project]:
        """Case-insensitive substring match on one column."""

        raise NotImplementedError

    def list_by_assignees(self, *, employee_ids: Iterable[int], limit: int) -> Sequence[Project]:
        raise NotImplementedError
