from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import DASHBOARD_RECENT_COUNT, DASHBOARD_UPCOMING_COUNT, DEFAULT_CURRENCY
from ..core.enums import ProjectStatus
from ..employees.repository import EmployeeRepository
from ..projects.repository import ProjectRepository
from . import aggregation
from .model import AnalyticsOverview, DashboardSummary, PeriodFilter
from .ranking.base import RankingStrategy
from .ranking.earnings import EarningsRanking

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Use case: business analytics over projects and employees."""

    def __init__(
        self,
        projects: ProjectRepository,
        employees: EmployeeRepository,
        *,
        ranking: Optional[RankingStrategy] = None,
        currency: str = DEFAULT_CURRENCY,
    ):
        self._projects = projects
        self._employees = employees
        self._ranking = ranking or EarningsRanking()
        self._currency = currency

    @property
    def currency(self) -> str:
        return self._currency

    def build_overview(self, period: PeriodFilter, *, today: Optional[date] = None) -> AnalyticsOverview:
        today = today or now_local().date()
        all_projects = list(self._projects.list_all())
        employees = list(self._employees.list_all())

        projects = aggregation.filter_by_period(all_projects, period)
        summary = aggregation.summarize(projects)
        monthly = aggregation.monthly_rollup(projects)
        ranked = aggregation.employee_performance(employees, projects, self._ranking)
        clients = aggregation.client_performance(projects)
        trend = aggregation.revenue_trend(monthly)

        logger.debug(
            "Analytics for month=%s year=%s: %d of %d projects",
            period.month,
            period.year,
            len(projects),
            len(all_projects),
        )

        return AnalyticsOverview(
            period=period,
            projects=projects,
            summary=summary,
            monthly=monthly,
            employees=ranked,
            status_counts=aggregation.status_distribution(projects),
            clients=clients,
            trend=trend,
            insights=aggregation.insights(
                summary,
                ranked[0] if ranked else None,
                clients[0] if clients else None,
                trend,
                currency=self._currency,
                ranking_label=self._ranking.label,
            ),
            employee_count=len(employees),
            years=aggregation.year_options(all_projects, today),
            ranking_label=self._ranking.label,
        )

    def build_dashboard(self, today: Optional[date] = None) -> DashboardSummary:
        today = today or now_local().date()
        projects = list(self._projects.list_all())
        employees = list(self._employees.list_all())
        summary = aggregation.summarize(projects)

        recent = sorted(
            (p for p in projects if p.created_at is not None),
            key=lambda p: p.created_at or datetime.min,
            reverse=True,
        )[:DASHBOARD_RECENT_COUNT]

        upcoming = sorted(
            (p for p in projects if p.status == ProjectStatus.RUNNING and p.deadline_date is not None),
            key=lambda p: p.deadline_date,
        )[:DASHBOARD_UPCOMING_COUNT]

        return DashboardSummary(
            total_revenue=summary.total_revenue,
            running_projects=sum(1 for p in projects if p.status == ProjectStatus.RUNNING),
            delivered_projects=summary.completed_projects,
            employee_count=len(employees),
            recent_projects=recent,
            upcoming_projects=upcoming,
            employee_names={e.employee_id: e.full_name for e in employees},
            days_left={p.project_id: (p.deadline_date - today).days for p in upcoming},
        )
