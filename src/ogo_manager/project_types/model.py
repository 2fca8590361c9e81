from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ProjectType:
    """Taxonomy tag describing the nature of a project."""

    type_id: int
    name: str
    created_at: Optional[datetime] = None
