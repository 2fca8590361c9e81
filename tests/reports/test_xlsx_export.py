from __future__ import annotations

import io

import pandas as pd

from ogo_manager.reports.rows import EXPORT_COLUMNS, project_export_rows
from ogo_manager.reports.xlsx_export import SHEET_NAME, projects_to_xlsx


def test_xlsx_has_same_rows_as_projects(projects_repo, employees_repo, types_repo):
    projects = projects_repo.list_all()
    rows = project_export_rows(projects, employees_repo.list_all(), types_repo.list_all())

    content = projects_to_xlsx(rows)
    df = pd.read_excel(io.BytesIO(content), sheet_name=SHEET_NAME, engine="openpyxl", dtype=str)

    assert list(df.columns) == EXPORT_COLUMNS
    assert len(df) == len(projects)
    assert set(df["Project ID"]) == {"PJ1001", "PJ1002", "PJ1003"}
