from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.enums import ConnectionState
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HealthStatus:
    state: ConnectionState
    checked_at: datetime
    message: Optional[str] = None

    @property
    def is_connected(self) -> bool:
        return self.state == ConnectionState.CONNECTED


class HealthService:
    """Connectivity probe: a minimal employees query against the store."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def check(self) -> HealthStatus:
        checked_at = now_local()
        try:
            self._employees.ping()
        except Exception as e:
            logger.error("Database connection check failed: %s", e)
            return HealthStatus(state=ConnectionState.DISCONNECTED, checked_at=checked_at, message="Database unreachable")
        return HealthStatus(state=ConnectionState.CONNECTED, checked_at=checked_at)
