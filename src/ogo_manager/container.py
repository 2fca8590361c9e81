from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admin.mysql_admin_repository import MySQLAdminRepository
from .admin.repository import AdminRepository
from .admin.service import AdminAuthService
from .analytics.ranking.factory import ranking_for
from .analytics.service import AnalyticsService
from .audit.mysql_log_repository import MySQLLogRepository
from .audit.repository import LogRepository
from .audit.service import AuditService
from .core.constants import DEFAULT_CURRENCY, DEFAULT_SEARCH_LIMIT
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .health.service import HealthService
from .project_types.mysql_project_type_repository import MySQLProjectTypeRepository
from .project_types.repository import ProjectTypeRepository
from .project_types.service import ProjectTypeService
from .projects.mysql_project_repository import MySQLProjectRepository
from .projects.repository import ProjectRepository
from .projects.search import ProjectSearchService
from .projects.service import ProjectService
from .reports.pdf.common import CompanyInfo
from .reports.service import ExportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    projects_repo: ProjectRepository
    project_types_repo: ProjectTypeRepository
    admins_repo: AdminRepository
    logs_repo: LogRepository

    audit_service: AuditService
    auth_service: AdminAuthService
    employee_service: EmployeeService
    project_type_service: ProjectTypeService
    project_service: ProjectService
    search_service: ProjectSearchService
    analytics_service: AnalyticsService
    export_service: ExportService
    health_service: HealthService


def assemble(
    *,
    employees_repo: EmployeeRepository,
    projects_repo: ProjectRepository,
    project_types_repo: ProjectTypeRepository,
    admins_repo: AdminRepository,
    logs_repo: LogRepository,
    settings: object = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of the given repositories (MySQL or in-memory)."""

    currency = str(getattr(settings, "CURRENCY", DEFAULT_CURRENCY))
    search_limit = int(getattr(settings, "SEARCH_RESULT_LIMIT", DEFAULT_SEARCH_LIMIT))
    ranking = ranking_for(getattr(settings, "EMPLOYEE_RANKING", "earnings"))
    company = CompanyInfo.from_dict(getattr(settings, "COMPANY", None) or {"name": "OGO TECHNOLOGY"})
    report_prefix = str(getattr(settings, "REPORT_FILENAME_PREFIX", "OGO-Analytics"))

    audit_service = AuditService(logs_repo)
    auth_service = AdminAuthService(admins_repo, audit_service)
    analytics_service = AnalyticsService(projects_repo, employees_repo, ranking=ranking, currency=currency)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        projects_repo=projects_repo,
        project_types_repo=project_types_repo,
        admins_repo=admins_repo,
        logs_repo=logs_repo,
        audit_service=audit_service,
        auth_service=auth_service,
        employee_service=EmployeeService(employees_repo),
        project_type_service=ProjectTypeService(project_types_repo),
        project_service=ProjectService(projects_repo, employees_repo, project_types_repo),
        search_service=ProjectSearchService(projects_repo, employees_repo, limit=search_limit),
        analytics_service=analytics_service,
        export_service=ExportService(
            auth=auth_service,
            analytics=analytics_service,
            audit=audit_service,
            projects=projects_repo,
            employees=employees_repo,
            types=project_types_repo,
            company=company,
            report_prefix=report_prefix,
        ),
        health_service=HealthService(employees_repo),
    )


def build_container(*, db_config: dict, settings: object = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        employees_repo=MySQLEmployeeRepository(conn),
        projects_repo=MySQLProjectRepository(conn),
        project_types_repo=MySQLProjectTypeRepository(conn),
        admins_repo=MySQLAdminRepository(conn),
        logs_repo=MySQLLogRepository(conn),
        settings=settings,
        conn=conn,
    )
