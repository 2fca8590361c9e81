from __future__ import annotations

import csv
import io

from conftest import make_project

from ogo_manager.analytics.model import PeriodFilter
from ogo_manager.reports.csv_export import projects_to_csv
from ogo_manager.reports.naming import projects_export_basename
from ogo_manager.reports.rows import EXPORT_COLUMNS, project_export_rows


def _read(content: bytes):
    assert content.startswith(b"\xef\xbb\xbf")
    return list(csv.DictReader(io.StringIO(content.decode("utf-8-sig"))))


def test_one_row_per_project(projects_repo, employees_repo, types_repo):
    projects = projects_repo.list_all()
    rows = project_export_rows(projects, employees_repo.list_all(), types_repo.list_all())

    parsed = _read(projects_to_csv(rows))

    assert len(parsed) == len(projects)
    assert list(parsed[0].keys()) == EXPORT_COLUMNS


def test_row_values(projects_repo, employees_repo, types_repo):
    rows = project_export_rows([projects_repo.get_by_id(2)], employees_repo.list_all(), types_repo.list_all())
    row = _read(projects_to_csv(rows))[0]

    assert row["Project ID"] == "PJ1002"
    assert row["Project Description"] == "Research Paper, Presentation"
    assert row["Assigned To"] == "Kamala Silva"
    assert row["Price"] == "20000.00"
    assert row["Fast Deliver"] == "Yes"
    assert row["Deadline Date"] == "2024-03-28"


def test_unassigned_and_untyped_project(employees_repo, types_repo):
    project = make_project(9, client_name='Quote "Co", Ltd')
    row = _read(projects_to_csv(project_export_rows([project], employees_repo.list_all(), types_repo.list_all())))[0]

    assert row["Assigned To"] == "Unassigned"
    assert row["Project Description"] == "No types specified"
    assert row["Client Name"] == 'Quote "Co", Ltd'
    assert row["Fast Deliver"] == "No"


def test_empty_export_has_header_only():
    assert _read(projects_to_csv([])) == []


def test_export_basenames():
    assert projects_export_basename(PeriodFilter(month=3, year=2024)) == "projects_March_2024"
    assert projects_export_basename(PeriodFilter(month=3)) == "projects_March_all_years"
    assert projects_export_basename(PeriodFilter(year=2024)) == "projects_2024"
    assert projects_export_basename(PeriodFilter()) == "projects_all_time"
