from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from ..core.enums import ProjectStatus, TrendDirection
from ..employees.model import Employee
from ..projects.model import Project

ZERO = Decimal("0")


@dataclass(frozen=True)
class PeriodFilter:
    """Selected month (1..12) and year; None means 'all'."""

    month: Optional[int] = None
    year: Optional[int] = None

    @property
    def is_all_time(self) -> bool:
        return self.month is None and self.year is None


@dataclass(frozen=True)
class MonthlyStats:
    month: str  # YYYY-MM
    revenue: Decimal = ZERO
    projects: int = 0
    completed: int = 0
    employee_payments: Decimal = ZERO

    @property
    def profit(self) -> Decimal:
        return self.revenue - self.employee_payments

    @property
    def average_value(self) -> Decimal:
        if not self.projects:
            return ZERO
        return self.revenue / self.projects

    @property
    def completion_rate(self) -> float:
        if not self.projects:
            return 0.0
        return self.completed / self.projects * 100


@dataclass(frozen=True)
class Summary:
    total_revenue: Decimal
    total_employee_payments: Decimal
    profit: Decimal
    profit_margin: float
    total_projects: int
    completed_projects: int
    completion_rate: float
    average_project_value: Decimal
    payment_ratio: float


@dataclass(frozen=True)
class EmployeePerformance:
    employee: Employee
    project_count: int
    completed_projects: int
    total_earnings: Decimal
    revenue: Decimal
    score: Decimal = ZERO

    @property
    def completion_rate(self) -> float:
        if not self.project_count:
            return 0.0
        return self.completed_projects / self.project_count * 100


@dataclass(frozen=True)
class ClientStats:
    client: str
    count: int
    revenue: Decimal

    @property
    def average_value(self) -> Decimal:
        if not self.count:
            return ZERO
        return self.revenue / self.count


@dataclass(frozen=True)
class RevenueTrend:
    direction: TrendDirection
    months: int
    monthly_average: Decimal


@dataclass(frozen=True)
class AnalyticsOverview:
    period: PeriodFilter
    projects: List[Project]
    summary: Summary
    monthly: List[MonthlyStats]
    employees: List[EmployeePerformance]
    status_counts: List[Tuple[ProjectStatus, int]]
    clients: List[ClientStats]
    trend: RevenueTrend
    insights: List[str]
    employee_count: int
    years: List[int]
    ranking_label: str = "Earnings"

    @property
    def best_employee(self) -> Optional[EmployeePerformance]:
        return self.employees[0] if self.employees else None

    @property
    def best_client(self) -> Optional[ClientStats]:
        return self.clients[0] if self.clients else None


@dataclass(frozen=True)
class DashboardSummary:
    total_revenue: Decimal
    running_projects: int
    delivered_projects: int
    employee_count: int
    recent_projects: List[Project] = field(default_factory=list)
    upcoming_projects: List[Project] = field(default_factory=list)
    employee_names: Dict[int, str] = field(default_factory=dict)
    days_left: Dict[int, int] = field(default_factory=dict)
