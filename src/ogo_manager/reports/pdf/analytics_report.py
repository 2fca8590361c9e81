from __future__ import annotations

import io
import logging
from datetime import datetime
from functools import partial
from typing import Dict, List, Sequence
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from ...analytics.model import AnalyticsOverview
from ...common.datetime_utils import short_month_label
from ...common.formatting import format_date, format_money, format_percent
from ...employees.model import Employee
from ..naming import period_labels, report_title
from ..rows import assignee_name
from .common import (
    CONTENT_WIDTH,
    MARGIN,
    STYLES,
    CompanyInfo,
    NumberedCanvas,
    company_header,
    data_table,
    section,
)

logger = logging.getLogger(__name__)

REGISTER_HEADER = ["Project ID", "Client", "Uni/Org", "Status", "Assigned To", "Price", "Created"]
TREND_MONTHS = 6
CONFIDENTIAL = "Confidential Business Report - For Internal Use Only"


def project_register_rows(
    overview: AnalyticsOverview,
    employees_by_id: Dict[int, Employee],
    currency: str,
) -> List[List[str]]:
    """One register row per project of the reported period."""
    return [
        [
            p.project_code,
            p.client_name,
            p.client_uni_org,
            p.status.value,
            assignee_name(p, employees_by_id),
            format_money(p.price, currency),
            format_date(p.created_at.date() if p.created_at else None),
        ]
        for p in overview.projects
    ]


class AnalyticsReportGenerator:
    """Build the analytics PDF for one period.

    Usage:
        pdf_bytes = AnalyticsReportGenerator(overview, company=company, currency="LKR").generate()
    """

    def __init__(
        self,
        overview: AnalyticsOverview,
        *,
        company: CompanyInfo,
        currency: str,
        employees: Sequence[Employee] = (),
        generated_at: datetime | None = None,
    ):
        self.overview = overview
        self.company = company
        self.currency = currency
        self.employees_by_id = {e.employee_id: e for e in employees}
        for perf in overview.employees:
            self.employees_by_id.setdefault(perf.employee.employee_id, perf.employee)
        self.generated_at = generated_at or datetime.now()

    def _money(self, amount) -> str:
        return format_money(amount, self.currency)

    def _summary(self) -> List:
        s = self.overview.summary
        best = self.overview.best_employee
        rows = [
            ["Total Revenue", self._money(s.total_revenue)],
            ["Employee Payments", self._money(s.total_employee_payments)],
            ["Profit", self._money(s.profit)],
            ["Profit Margin", format_percent(s.profit_margin)],
            ["Total Projects", str(s.total_projects)],
            ["Completed Projects", str(s.completed_projects)],
            ["Completion Rate", format_percent(s.completion_rate)],
            ["Average Project Value", self._money(s.average_project_value)],
            ["Employees", str(self.overview.employee_count)],
            ["Best Employee", best.employee.full_name if best else "N/A"],
        ]
        return [section("Executive Summary"), data_table(["Metric", "Value"], rows, [8 * cm, CONTENT_WIDTH - 8 * cm])]

    def _trend(self) -> List:
        monthly = self.overview.monthly[-TREND_MONTHS:]
        if not monthly:
            return []
        rows = [
            [short_month_label(m.month), self._money(m.revenue), self._money(m.profit), str(m.projects), str(m.completed)]
            for m in monthly
        ]
        widths = [3 * cm, 4.5 * cm, 4.5 * cm, 3 * cm, CONTENT_WIDTH - 15 * cm]
        return [
            section("Revenue Trend Analysis"),
            data_table(["Month", "Revenue", "Profit", "Projects", "Completed"], rows, widths),
        ]

    def _monthly(self) -> List:
        if not self.overview.monthly:
            return []
        rows = [
            [
                short_month_label(m.month),
                str(m.projects),
                str(m.completed),
                self._money(m.revenue),
                self._money(m.profit),
                self._money(m.average_value),
            ]
            for m in self.overview.monthly
        ]
        widths = [2.5 * cm, 2 * cm, 2.2 * cm, 3.8 * cm, 3.8 * cm, CONTENT_WIDTH - 14.3 * cm]
        return [
            section("Monthly Performance"),
            data_table(["Month", "Projects", "Completed", "Revenue", "Profit", "Average"], rows, widths),
        ]

    def _employees(self) -> List:
        if not self.overview.employees:
            return []
        rows = [
            [
                perf.employee.full_name,
                str(perf.project_count),
                str(perf.completed_projects),
                format_percent(perf.completion_rate),
                self._money(perf.total_earnings),
                self._money(perf.revenue),
            ]
            for perf in self.overview.employees
        ]
        widths = [4.5 * cm, 2 * cm, 2.2 * cm, 2.3 * cm, 3.5 * cm, CONTENT_WIDTH - 14.5 * cm]
        return [
            section(f"Employee Performance (ranked by {self.overview.ranking_label.lower()})"),
            data_table(["Employee", "Projects", "Completed", "Rate", "Earnings", "Revenue"], rows, widths),
        ]

    def _clients(self) -> List:
        if not self.overview.clients:
            return []
        rows = [
            [c.client or "N/A", str(c.count), self._money(c.revenue), self._money(c.average_value)]
            for c in self.overview.clients
        ]
        widths = [7 * cm, 2.5 * cm, 4 * cm, CONTENT_WIDTH - 13.5 * cm]
        return [
            section("Client Performance"),
            data_table(["Client", "Projects", "Revenue", "Average Value"], rows, widths),
        ]

    def _register(self) -> List:
        rows = project_register_rows(self.overview, self.employees_by_id, self.currency)
        if not rows:
            return [section("Project Register"), Paragraph("No projects in this period.", STYLES["body"])]
        widths = [2 * cm, 3.3 * cm, 3.3 * cm, 2 * cm, 3 * cm, 2.6 * cm, CONTENT_WIDTH - 16.2 * cm]
        return [section("Project Register"), data_table(REGISTER_HEADER, rows, widths)]

    def _insights(self) -> List:
        out: List = [section("Key Insights & Recommendations")]
        for line in self.overview.insights:
            out.append(Paragraph(f"&bull; {escape(line)}", STYLES["body"]))
        return out

    def build_story(self) -> List:
        month_label, year_label = period_labels(self.overview.period)
        generated = self.generated_at.strftime("%d/%m/%Y at %H:%M:%S")

        story: List = company_header(self.company)
        story.append(Paragraph(escape(report_title(self.overview.period)), STYLES["title"]))
        story.append(
            Paragraph(f"Report Period: {month_label} {year_label} ~ Generated: {generated}", STYLES["subtitle"])
        )
        story.append(Spacer(1, 0.4 * cm))
        for part in (self._summary, self._trend, self._monthly, self._employees, self._clients, self._register, self._insights):
            story.extend(part())
        return story

    def generate(self) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=2 * cm,
            title=report_title(self.overview.period),
            author=self.company.name,
        )
        footer = [f"{self.company.name} - Professional Project Management System", CONFIDENTIAL]
        doc.build(self.build_story(), canvasmaker=partial(NumberedCanvas, footer_lines=footer))
        logger.info("Rendered analytics report with %d project(s)", len(self.overview.projects))
        return buffer.getvalue()
