from __future__ import annotations

from decimal import Decimal

from ..model import EmployeePerformance
from .base import RankingStrategy


class RevenueRanking(RankingStrategy):
    """Rank by the client revenue of the employee's projects."""

    label = "Revenue"

    def score(self, perf: EmployeePerformance) -> Decimal:
        return perf.revenue
