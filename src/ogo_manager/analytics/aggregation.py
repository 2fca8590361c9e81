"""Pure aggregation helpers behind the analytics screen, dashboard and reports.

Everything here works on in-memory lists and is recomputed per request.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..common.datetime_utils import month_key
from ..common.formatting import format_money, format_percent
from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import ProjectStatus, TrendDirection
from ..employees.model import Employee
from ..projects.model import Project
from .model import (
    ZERO,
    ClientStats,
    EmployeePerformance,
    MonthlyStats,
    PeriodFilter,
    RevenueTrend,
    Summary,
)
from .ranking.base import RankingStrategy
from .ranking.earnings import EarningsRanking


def _ratio(part, whole) -> float:
    if not whole:
        return 0.0
    return float(part) / float(whole) * 100


def filter_by_period(projects: Iterable[Project], period: PeriodFilter) -> List[Project]:
    if period.is_all_time:
        return list(projects)

    out = []
    for p in projects:
        if p.created_at is None:
            continue
        if period.month is not None and p.created_at.month != period.month:
            continue
        if period.year is not None and p.created_at.year != period.year:
            continue
        out.append(p)
    return out


def monthly_rollup(projects: Iterable[Project]) -> List[MonthlyStats]:
    buckets: Dict[str, Dict[str, object]] = {}
    for p in projects:
        if p.created_at is None:
            continue
        key = month_key(p.created_at)
        b = buckets.setdefault(key, {"revenue": ZERO, "projects": 0, "completed": 0, "payments": ZERO})
        b["revenue"] += p.price
        b["projects"] += 1
        b["payments"] += p.payment_of_emp
        if p.is_delivered:
            b["completed"] += 1

    return [
        MonthlyStats(
            month=key,
            revenue=b["revenue"],
            projects=b["projects"],
            completed=b["completed"],
            employee_payments=b["payments"],
        )
        for key, b in sorted(buckets.items())
    ]


def summarize(projects: Sequence[Project]) -> Summary:
    revenue = sum((p.price for p in projects), ZERO)
    payments = sum((p.payment_of_emp for p in projects), ZERO)
    profit = revenue - payments
    total = len(projects)
    completed = sum(1 for p in projects if p.is_delivered)

    return Summary(
        total_revenue=revenue,
        total_employee_payments=payments,
        profit=profit,
        profit_margin=_ratio(profit, revenue),
        total_projects=total,
        completed_projects=completed,
        completion_rate=_ratio(completed, total),
        average_project_value=revenue / total if total else ZERO,
        payment_ratio=_ratio(payments, revenue),
    )


def employee_performance(
    employees: Sequence[Employee],
    projects: Sequence[Project],
    ranking: Optional[RankingStrategy] = None,
) -> List[EmployeePerformance]:
    ranking = ranking or EarningsRanking()

    by_employee: Dict[int, List[Project]] = {}
    for p in projects:
        if p.assigned_to is not None:
            by_employee.setdefault(p.assigned_to, []).append(p)

    rows = []
    for emp in employees:
        own = by_employee.get(emp.employee_id, [])
        perf = EmployeePerformance(
            employee=emp,
            project_count=len(own),
            completed_projects=sum(1 for p in own if p.is_delivered),
            total_earnings=sum((p.payment_of_emp for p in own), ZERO),
            revenue=sum((p.price for p in own), ZERO),
        )
        rows.append(replace(perf, score=ranking.score(perf)))

    # sorted() is stable: equal scores keep employee order
    return sorted(rows, key=lambda r: r.score, reverse=True)


def status_distribution(projects: Iterable[Project]) -> List[Tuple[ProjectStatus, int]]:
    counts: "OrderedDict[ProjectStatus, int]" = OrderedDict((s, 0) for s in ProjectStatus)
    for p in projects:
        counts[p.status] += 1
    return list(counts.items())


def client_performance(projects: Iterable[Project]) -> List[ClientStats]:
    stats: Dict[str, List] = {}
    for p in projects:
        entry = stats.setdefault(p.client_uni_org or "", [0, ZERO])
        entry[0] += 1
        entry[1] += p.price

    rows = [ClientStats(client=client, count=count, revenue=revenue) for client, (count, revenue) in stats.items()]
    return sorted(rows, key=lambda c: c.revenue, reverse=True)


def revenue_trend(monthly: Sequence[MonthlyStats]) -> RevenueTrend:
    if len(monthly) < 2:
        direction = TrendDirection.STABLE
    elif monthly[-1].revenue > monthly[-2].revenue:
        direction = TrendDirection.INCREASING
    else:
        direction = TrendDirection.DECREASING

    average = sum((m.revenue for m in monthly), ZERO) / len(monthly) if monthly else ZERO
    return RevenueTrend(direction=direction, months=len(monthly), monthly_average=average)


def year_options(projects: Iterable[Project], today: date) -> List[int]:
    years = [p.created_at.year for p in projects if p.created_at is not None]
    newest = max(years) if years else today.year + 2
    oldest = min(years) if years else today.year - 3
    return list(range(newest, oldest - 1, -1))


def insights(
    summary: Summary,
    best_employee: Optional[EmployeePerformance],
    best_client: Optional[ClientStats],
    trend: RevenueTrend,
    *,
    currency: str = DEFAULT_CURRENCY,
    ranking_label: str = "Earnings",
) -> List[str]:
    """Key insight sentences shown at the end of the analytics report."""
    if best_employee:
        employee_line = (
            f"Best Performing Employee: {best_employee.employee.full_name} with "
            f"{format_money(best_employee.score, currency)} {ranking_label.lower()}"
        )
    else:
        employee_line = "Best Performing Employee: N/A"

    if best_client:
        client_line = f"Top Client: {best_client.client or 'N/A'} with {best_client.count} projects"
    else:
        client_line = "Top Client: N/A with 0 projects"

    return [
        f"Total Revenue: {format_money(summary.total_revenue, currency)} with "
        f"{format_percent(summary.profit_margin)} profit margin",
        f"Project Completion Rate: {format_percent(summary.completion_rate)} "
        f"({summary.completed_projects}/{summary.total_projects} projects)",
        employee_line,
        client_line,
        f"Average Project Value: {format_money(summary.average_project_value, currency)}",
        f"Employee Payment Ratio: {format_percent(summary.payment_ratio)} of revenue",
        f"Revenue Trend: {trend.direction.value} over the last {trend.months} months",
        f"Monthly Average Revenue: {format_money(trend.monthly_average, currency)}",
    ]
