from __future__ import annotations

from datetime import date, datetime

import pytest

from conftest import FakeSettings

from ogo_manager.analytics.model import PeriodFilter
from ogo_manager.analytics.service import AnalyticsService
from ogo_manager.reports.naming import report_filename, report_title
from ogo_manager.reports.pdf.analytics_report import AnalyticsReportGenerator, project_register_rows
from ogo_manager.reports.pdf.common import CompanyInfo
from ogo_manager.reports.pdf.receipt import receipt_rows, render_receipt


@pytest.fixture
def analytics(projects_repo, employees_repo):
    return AnalyticsService(projects_repo, employees_repo, currency="LKR")


@pytest.mark.parametrize(
    "period, title, filename",
    [
        (PeriodFilter(month=3, year=2024), "Analytics Report - March 2024", "OGO-Analytics-March-2024.pdf"),
        (PeriodFilter(year=2024), "Annual Analytics Report - 2024", "OGO-Analytics-2024.pdf"),
        (PeriodFilter(), "Comprehensive Analytics Report - All Time", "OGO-Analytics-Comprehensive-2025.pdf"),
        (PeriodFilter(month=3), "Analytics Report", "OGO-Analytics-Comprehensive-2025.pdf"),
    ],
)
def test_titles_and_filenames(period, title, filename):
    assert report_title(period) == title
    assert report_filename(period, prefix="OGO-Analytics", today=date(2025, 1, 10)) == filename


def test_register_has_one_row_per_filtered_project(analytics, employees_repo, fixed_now):
    overview = analytics.build_overview(PeriodFilter(month=3, year=2024), today=fixed_now.date())
    employees_by_id = {e.employee_id: e for e in employees_repo.list_all()}

    rows = project_register_rows(overview, employees_by_id, "LKR")

    assert len(rows) == len(overview.projects) == 2
    assert {r[0] for r in rows} == {"PJ1001", "PJ1002"}


def test_generate_pdf(analytics, employees_repo, fixed_now):
    overview = analytics.build_overview(PeriodFilter(), today=fixed_now.date())
    generator = AnalyticsReportGenerator(
        overview,
        company=CompanyInfo.from_dict(FakeSettings.COMPANY),
        currency="LKR",
        employees=employees_repo.list_all(),
        generated_at=fixed_now,
    )

    content = generator.generate()

    assert content.startswith(b"%PDF")
    assert len(content) > 1000


def test_generate_pdf_for_empty_period(analytics, fixed_now):
    overview = analytics.build_overview(PeriodFilter(month=1, year=1999), today=fixed_now.date())
    content = AnalyticsReportGenerator(overview, company=CompanyInfo(name="OGO & Co"), currency="LKR").generate()

    assert overview.projects == []
    assert content.startswith(b"%PDF")


def test_receipt(projects_repo, employees_repo, types_repo):
    project = projects_repo.get_by_id(2)
    employee = employees_repo.get_by_id(2)

    rows = dict(receipt_rows(project, types=types_repo.list_all(), employee=employee, currency="LKR"))
    assert rows["Balance"] == "LKR 15,000.00"
    assert rows["Project Types"] == "Research Paper, Presentation"
    assert rows["Delivery"] == "FAST DELIVERY"

    content = render_receipt(
        project,
        company=CompanyInfo.from_dict(FakeSettings.COMPANY),
        types=types_repo.list_all(),
        employee=employee,
        currency="LKR",
        generated_at=datetime(2024, 3, 20),
    )
    assert content.startswith(b"%PDF")
