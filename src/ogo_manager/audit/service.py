from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import DEFAULT_LOG_LIMIT
from ..core.enums import LogAction
from .model import LogEntry
from .repository import LogRepository

logger = logging.getLogger(__name__)

UNKNOWN_EMAIL = "Unknown"


class AuditService:
    """Writes the admin activity trail (log table)."""

    def __init__(self, logs: LogRepository):
        self._logs = logs

    def record(self, action: LogAction, *, admin_id: Optional[int] = None, admin_email: str = UNKNOWN_EMAIL) -> None:
        # An audit failure must never break the login or export it describes.
        try:
            self._logs.add(admin_id=admin_id, admin_email=admin_email, action=action.value)
        except Exception:
            logger.exception("Failed to log action %s for %s", action.value, admin_email)

    def list_recent(self, limit: int = DEFAULT_LOG_LIMIT) -> Sequence[LogEntry]:
        return self._logs.list_recent(limit=max(1, int(limit)))
