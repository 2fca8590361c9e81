from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..admin.service import AdminAuthService
from ..analytics.model import PeriodFilter
from ..analytics.service import AnalyticsService
from ..audit.service import AuditService
from ..common.datetime_utils import now_local
from ..core.enums import LogAction
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..project_types.repository import ProjectTypeRepository
from ..projects.repository import ProjectRepository
from .csv_export import projects_to_csv
from .naming import projects_export_basename, receipt_filename, report_filename
from .pdf.analytics_report import AnalyticsReportGenerator
from .pdf.common import CompanyInfo
from .pdf.receipt import render_receipt
from .rows import project_export_rows
from .xlsx_export import projects_to_xlsx

logger = logging.getLogger(__name__)

CSV_MIMETYPE = "text/csv"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MIMETYPE = "application/pdf"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    mimetype: str
    content: bytes
    rows: int = 0


class ExportService:
    """Use case: password-guarded project exports, analytics report and receipts."""

    def __init__(
        self,
        *,
        auth: AdminAuthService,
        analytics: AnalyticsService,
        audit: AuditService,
        projects: ProjectRepository,
        employees: EmployeeRepository,
        types: ProjectTypeRepository,
        company: CompanyInfo,
        report_prefix: str = "OGO-Analytics",
    ):
        self._auth = auth
        self._analytics = analytics
        self._audit = audit
        self._projects = projects
        self._employees = employees
        self._types = types
        self._company = company
        self._report_prefix = report_prefix

    def export_projects(self, *, password: str, period: PeriodFilter, fmt: str = "csv") -> ExportFile:
        fmt = (fmt or "").lower()
        if fmt not in ("csv", "xlsx"):
            raise ValidationError("Export format must be csv or xlsx")

        self._auth.verify_export_password(
            password,
            success_action=LogAction.EXPORT_SUCCESS,
            fail_action=LogAction.EXPORT_FAIL,
        )

        overview = self._analytics.build_overview(period)
        rows = project_export_rows(overview.projects, self._employees.list_all(), self._types.list_all())
        basename = projects_export_basename(period)
        if fmt == "xlsx":
            content, mimetype = projects_to_xlsx(rows), XLSX_MIMETYPE
        else:
            content, mimetype = projects_to_csv(rows), CSV_MIMETYPE

        logger.info("Exported %d project(s) as %s", len(rows), fmt)
        return ExportFile(filename=f"{basename}.{fmt}", mimetype=mimetype, content=content, rows=len(rows))

    def analytics_report(self, *, password: str, period: PeriodFilter, today: Optional[date] = None) -> ExportFile:
        admin = self._auth.verify_export_password(
            password,
            success_action=LogAction.EXPORT_AUTH_SUCCESS,
            fail_action=LogAction.EXPORT_AUTH_FAIL,
            error_action=LogAction.EXPORT_AUTH_ERROR,
        )

        now = now_local()
        overview = self._analytics.build_overview(period, today=today or now.date())
        generator = AnalyticsReportGenerator(
            overview,
            company=self._company,
            currency=self._analytics.currency,
            employees=self._employees.list_all(),
            generated_at=now,
        )
        content = generator.generate()
        self._audit.record(LogAction.EXPORT_SUCCESS, admin_id=admin.admin_id, admin_email=admin.email)

        return ExportFile(
            filename=report_filename(period, prefix=self._report_prefix, today=today or now.date()),
            mimetype=PDF_MIMETYPE,
            content=content,
            rows=len(overview.projects),
        )

    def project_receipt(self, project_id: int) -> ExportFile:
        project = self._projects.get_by_id(int(project_id))
        if not project:
            raise NotFoundError("Project not found")
        employee = self._employees.get_by_id(project.assigned_to) if project.assigned_to is not None else None

        content = render_receipt(
            project,
            company=self._company,
            types=self._types.list_all(),
            employee=employee,
            currency=self._analytics.currency,
        )
        return ExportFile(filename=receipt_filename(project.project_id), mimetype=PDF_MIMETYPE, content=content, rows=1)
