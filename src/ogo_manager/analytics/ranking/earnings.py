from __future__ import annotations

from decimal import Decimal

from ..model import EmployeePerformance
from .base import RankingStrategy


class EarningsRanking(RankingStrategy):
    """Default rule: rank by the total paid out to the employee."""

    label = "Earnings"

    def score(self, perf: EmployeePerformance) -> Decimal:
        return perf.total_earnings
