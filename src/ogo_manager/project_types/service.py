from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..common.validators import require_max_length, require_non_empty
from ..core.constants import MAX_PROJECT_TYPE_LENGTH
from ..core.exceptions import NotFoundError, ValidationError
from .model import ProjectType
from .repository import ProjectTypeRepository

logger = logging.getLogger(__name__)

NO_TYPES_LABEL = "No types specified"


def describe_types(type_ids: Iterable[int], types: Sequence[ProjectType]) -> str:
    """Render a project's type ids as display names.

    Ids without a matching row are shown as 'Unknown Type (<id>)'.
    """

    ids = list(type_ids)
    if not ids:
        return NO_TYPES_LABEL
    names = {t.type_id: t.name for t in types}
    return ", ".join(names.get(type_id, f"Unknown Type ({type_id})") for type_id in ids)


class ProjectTypeService:
    """Use case: maintain the project type taxonomy (settings panel)."""

    def __init__(self, types: ProjectTypeRepository):
        self._types = types

    def list_types(self) -> Sequence[ProjectType]:
        return self._types.list_all()

    def add_type(self, name: str) -> int:
        name = require_max_length(require_non_empty(name, "Project type name"), "Project type name", MAX_PROJECT_TYPE_LENGTH)
        if self._types.get_by_name(name):
            raise ValidationError("Project type already exists")
        type_id = self._types.create(name=name)
        logger.info("Added project type %s (%s)", type_id, name)
        return type_id

    def rename_type(self, type_id: int, name: str) -> None:
        name = require_max_length(require_non_empty(name, "Project type name"), "Project type name", MAX_PROJECT_TYPE_LENGTH)
        if not self._types.get_by_id(int(type_id)):
            raise NotFoundError("Project type not found")
        existing = self._types.get_by_name(name)
        if existing and existing.type_id != int(type_id):
            raise ValidationError("Project type already exists")
        self._types.rename(int(type_id), name=name)

    def delete_type(self, type_id: int) -> None:
        if not self._types.delete(int(type_id)):
            raise NotFoundError("Project type not found")
        logger.info("Deleted project type %s", type_id)

    def describe(self, type_ids: Iterable[int]) -> str:
        return describe_types(type_ids, self._types.list_all())
