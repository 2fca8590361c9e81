from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import EmployeePerformance


class RankingStrategy(ABC):
    """Strategy Pattern: the score employees are ordered by in performance tables."""

    label: str = ""

    @abstractmethod
    def score(self, perf: EmployeePerformance) -> Decimal:
        raise NotImplementedError
