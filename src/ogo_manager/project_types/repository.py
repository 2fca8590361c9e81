from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ProjectType


class ProjectTypeRepository(Protocol):
    def list_all(self) -> Sequence[ProjectType]:
        """All types, oldest first."""

        raise NotImplementedError

    def get_by_id(self, type_id: int) -> Optional[ProjectType]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[ProjectType]:
        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError

    def rename(self, type_id: int, *, name: str) -> bool:
        raise NotImplementedError

    def delete(self, type_id: int) -> bool:
        raise NotImplementedError
