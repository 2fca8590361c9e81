from __future__ import annotations

import io
from datetime import datetime
from functools import partial
from typing import Optional, Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from ...common.formatting import format_date, format_money
from ...employees.model import Employee
from ...project_types.model import ProjectType
from ...project_types.service import describe_types
from ...projects.model import Project
from .common import CONTENT_WIDTH, MARGIN, STYLES, CompanyInfo, NumberedCanvas, company_header, data_table

FAST_DELIVERY = "FAST DELIVERY"


def receipt_rows(
    project: Project,
    *,
    types: Sequence[ProjectType],
    employee: Optional[Employee],
    currency: str,
) -> list[list[str]]:
    rows = [
        ["Project ID", project.project_code],
        ["Client", project.client_name],
        ["University/Org", project.client_uni_org or "-"],
        ["Project Types", describe_types(project.type_ids, types)],
        ["Deadline", format_date(project.deadline_date) or "-"],
        ["Status", project.status.value],
        ["Assigned To", employee.full_name if employee else "Unassigned"],
        ["Price", format_money(project.price, currency)],
        ["Advance", format_money(project.advance, currency)],
        ["Balance", format_money(project.balance, currency)],
    ]
    if project.fast_deliver:
        rows.append(["Delivery", FAST_DELIVERY])
    return rows


def render_receipt(
    project: Project,
    *,
    company: CompanyInfo,
    types: Sequence[ProjectType],
    employee: Optional[Employee],
    currency: str,
    generated_at: Optional[datetime] = None,
) -> bytes:
    generated_at = generated_at or datetime.now()
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN,
        bottomMargin=2 * cm,
        title=f"Project Receipt {project.project_code}",
        author=company.name,
    )

    story = company_header(company)
    story.append(Paragraph("Project Receipt", STYLES["title"]))
    story.append(Paragraph(f"Generated on: {generated_at.strftime('%d/%m/%Y')}", STYLES["subtitle"]))
    story.append(Spacer(1, 0.5 * cm))
    rows = receipt_rows(project, types=types, employee=employee, currency=currency)
    story.append(data_table(["Detail", "Value"], rows, [6 * cm, CONTENT_WIDTH - 6 * cm]))

    doc.build(story, canvasmaker=partial(NumberedCanvas, footer_lines=[f"Thank you for choosing {company.name}"]))
    return buffer.getvalue()
