from __future__ import annotations

from typing import Dict, List, Sequence

from ..common.formatting import format_date, format_timestamp
from ..employees.model import Employee
from ..project_types.model import ProjectType
from ..project_types.service import describe_types
from ..projects.model import Project

UNASSIGNED = "Unassigned"

EXPORT_COLUMNS = [
    "ID",
    "Project ID",
    "Client Name",
    "Client Uni/Org",
    "Project Description",
    "Deadline Date",
    "Price",
    "Advance",
    "Assigned To",
    "Payment of Employee",
    "Status",
    "Fast Deliver",
    "Created At",
    "Updated At",
]


def assignee_name(project: Project, employees_by_id: Dict[int, Employee]) -> str:
    if project.assigned_to is None:
        return UNASSIGNED
    employee = employees_by_id.get(project.assigned_to)
    return employee.full_name if employee else UNASSIGNED


def project_export_rows(
    projects: Sequence[Project],
    employees: Sequence[Employee],
    types: Sequence[ProjectType],
) -> List[dict]:
    """One flat row per project, keyed by EXPORT_COLUMNS."""
    employees_by_id = {e.employee_id: e for e in employees}
    return [
        {
            "ID": p.project_id,
            "Project ID": p.project_code,
            "Client Name": p.client_name,
            "Client Uni/Org": p.client_uni_org,
            "Project Description": describe_types(p.type_ids, types),
            "Deadline Date": format_date(p.deadline_date),
            "Price": f"{p.price:.2f}",
            "Advance": f"{p.advance:.2f}",
            "Assigned To": assignee_name(p, employees_by_id),
            "Payment of Employee": f"{p.payment_of_emp:.2f}",
            "Status": p.status.value,
            "Fast Deliver": "Yes" if p.fast_deliver else "No",
            "Created At": format_timestamp(p.created_at),
            "Updated At": format_timestamp(p.updated_at),
        }
        for p in projects
    ]
