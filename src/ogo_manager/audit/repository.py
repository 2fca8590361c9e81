from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LogEntry


class LogRepository(Protocol):
    def add(self, *, admin_id: Optional[int], admin_email: str, action: str) -> int:
        raise NotImplementedError

    def list_recent(self, *, limit: int) -> Sequence[LogEntry]:
        raise NotImplementedError
