from __future__ import annotations

from ...core.enums import RankingMetric
from ...core.exceptions import ValidationError
from .base import RankingStrategy
from .earnings import EarningsRanking
from .revenue import RevenueRanking


def ranking_for(metric: str | RankingMetric) -> RankingStrategy:
    """Factory Pattern: choose the ranking strategy configured by EMPLOYEE_RANKING."""
    try:
        metric = RankingMetric(metric)
    except ValueError:
        raise ValidationError(f"Unknown employee ranking: {metric}")

    if metric == RankingMetric.REVENUE:
        return RevenueRanking()
    return EarningsRanking()
