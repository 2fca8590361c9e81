"""JSON shapes returned by the API controllers."""

from __future__ import annotations

from datetime import date
from typing import Dict, Optional, Sequence

from ..analytics.model import AnalyticsOverview, DashboardSummary, EmployeePerformance
from ..audit.model import LogEntry
from ..employees.model import Employee
from ..project_types.model import ProjectType
from ..project_types.service import describe_types
from ..projects.model import Project
from .formatting import format_date, format_timestamp


def money(value) -> str:
    return f"{value:.2f}"


def employee_json(e: Employee, *, today: Optional[date] = None) -> dict:
    out = {
        "id": e.employee_id,
        "employee_code": e.employee_code,
        "first_name": e.first_name,
        "last_name": e.last_name,
        "full_name": e.full_name,
        "birthday": format_date(e.birthday) or None,
        "position": e.position,
        "address": e.address,
        "whatsapp": e.whatsapp,
        "email": e.email,
        "qualifications": e.qualifications,
        "created_at": format_timestamp(e.created_at) or None,
    }
    if today is not None:
        out["age"] = e.age(today)
    return out


def project_json(
    p: Project,
    *,
    types: Sequence[ProjectType] = (),
    employee_names: Optional[Dict[int, str]] = None,
) -> dict:
    employee_names = employee_names or {}
    return {
        "id": p.project_id,
        "project_code": p.project_code,
        "client_name": p.client_name,
        "client_uni_org": p.client_uni_org,
        "type_ids": list(p.type_ids),
        "project_description": describe_types(p.type_ids, types),
        "deadline_date": format_date(p.deadline_date) or None,
        "price": money(p.price),
        "advance": money(p.advance),
        "balance": money(p.balance),
        "assigned_to": p.assigned_to,
        "assigned_to_name": employee_names.get(p.assigned_to) if p.assigned_to is not None else None,
        "payment_of_emp": money(p.payment_of_emp),
        "status": p.status.value,
        "fast_deliver": p.fast_deliver,
        "created_at": format_timestamp(p.created_at) or None,
        "updated_at": format_timestamp(p.updated_at) or None,
    }


def project_type_json(t: ProjectType) -> dict:
    return {"id": t.type_id, "name": t.name, "created_at": format_timestamp(t.created_at) or None}


def log_json(entry: LogEntry) -> dict:
    return {
        "id": entry.log_id,
        "admin_id": entry.admin_id,
        "admin_email": entry.admin_email,
        "action": entry.action,
        "created_at": format_timestamp(entry.created_at) or None,
    }


def _performance_json(perf: EmployeePerformance) -> dict:
    return {
        "employee_id": perf.employee.employee_id,
        "name": perf.employee.full_name,
        "project_count": perf.project_count,
        "completed_projects": perf.completed_projects,
        "completion_rate": perf.completion_rate,
        "total_earnings": money(perf.total_earnings),
        "revenue": money(perf.revenue),
        "score": money(perf.score),
    }


def overview_json(o: AnalyticsOverview, *, types: Sequence[ProjectType] = ()) -> dict:
    s = o.summary
    names = {perf.employee.employee_id: perf.employee.full_name for perf in o.employees}
    return {
        "period": {"month": o.period.month, "year": o.period.year},
        "summary": {
            "total_revenue": money(s.total_revenue),
            "total_employee_payments": money(s.total_employee_payments),
            "profit": money(s.profit),
            "profit_margin": s.profit_margin,
            "total_projects": s.total_projects,
            "completed_projects": s.completed_projects,
            "completion_rate": s.completion_rate,
            "average_project_value": money(s.average_project_value),
            "payment_ratio": s.payment_ratio,
        },
        "monthly": [
            {
                "month": m.month,
                "revenue": money(m.revenue),
                "projects": m.projects,
                "completed": m.completed,
                "employee_payments": money(m.employee_payments),
                "profit": money(m.profit),
                "average_value": money(m.average_value),
                "completion_rate": m.completion_rate,
            }
            for m in o.monthly
        ],
        "employees": [_performance_json(perf) for perf in o.employees],
        "ranking": o.ranking_label,
        "best_employee": _performance_json(o.best_employee) if o.best_employee else None,
        "status_distribution": [{"status": status.value, "count": count} for status, count in o.status_counts],
        "clients": [
            {
                "client": c.client,
                "count": c.count,
                "revenue": money(c.revenue),
                "average_value": money(c.average_value),
            }
            for c in o.clients
        ],
        "best_client": o.best_client.client if o.best_client else None,
        "trend": {
            "direction": o.trend.direction.value,
            "months": o.trend.months,
            "monthly_average": money(o.trend.monthly_average),
        },
        "insights": o.insights,
        "employee_count": o.employee_count,
        "years": o.years,
        "projects": [project_json(p, types=types, employee_names=names) for p in o.projects],
    }


def dashboard_json(d: DashboardSummary, *, types: Sequence[ProjectType] = ()) -> dict:
    return {
        "total_revenue": money(d.total_revenue),
        "running_projects": d.running_projects,
        "delivered_projects": d.delivered_projects,
        "employee_count": d.employee_count,
        "recent_projects": [
            project_json(p, types=types, employee_names=d.employee_names) for p in d.recent_projects
        ],
        "upcoming_projects": [
            {**project_json(p, types=types, employee_names=d.employee_names), "days_left": d.days_left.get(p.project_id)}
            for p in d.upcoming_projects
        ],
    }
