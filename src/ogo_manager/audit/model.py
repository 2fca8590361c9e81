from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class LogEntry:
    """One audit row: who did what, and when."""

    log_id: int
    admin_id: Optional[int]
    admin_email: str
    action: str
    created_at: Optional[datetime] = None
