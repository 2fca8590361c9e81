"""Shared reportlab building blocks for OGO documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, Spacer, Table, TableStyle

BRAND = colors.HexColor("#E16428")
DARK = colors.HexColor("#272121")
MUTED = colors.HexColor("#969696")

MARGIN = 1.5 * cm
CONTENT_WIDTH = A4[0] - 2 * MARGIN


@dataclass(frozen=True)
class CompanyInfo:
    name: str
    department: str = ""
    city: str = ""
    phone: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> "CompanyInfo":
        d = d or {}
        return cls(
            name=str(d.get("name", "")),
            department=str(d.get("department", "")),
            city=str(d.get("city", "")),
            phone=str(d.get("phone", "")),
            email=str(d.get("email", "")),
        )


def _styles() -> dict:
    base = getSampleStyleSheet()
    return {
        "company": ParagraphStyle("company", parent=base["Title"], fontSize=18, textColor=BRAND, spaceAfter=2),
        "meta": ParagraphStyle("meta", parent=base["Normal"], fontSize=9, alignment=TA_CENTER, textColor=DARK),
        "title": ParagraphStyle("title", parent=base["Title"], fontSize=16, textColor=DARK, spaceBefore=6),
        "subtitle": ParagraphStyle("subtitle", parent=base["Normal"], fontSize=10, alignment=TA_CENTER, textColor=MUTED),
        "section": ParagraphStyle("section", parent=base["Heading2"], fontSize=13, textColor=BRAND, spaceBefore=12),
        "body": ParagraphStyle("body", parent=base["Normal"], fontSize=9, leading=12),
        "cell": ParagraphStyle("cell", parent=base["Normal"], fontSize=7.5, leading=9),
    }


STYLES = _styles()


def company_header(company: CompanyInfo) -> List:
    lines = [Paragraph(escape(company.name.upper()), STYLES["company"])]
    if company.department:
        lines.append(Paragraph(escape(company.department), STYLES["meta"]))
    contact = " | ".join(v for v in (company.city, company.phone, company.email) if v)
    if contact:
        lines.append(Paragraph(escape(contact), STYLES["meta"]))
    lines.append(Spacer(1, 0.3 * cm))
    return lines


def section(title: str) -> Paragraph:
    return Paragraph(escape(title.upper()), STYLES["section"])


def data_table(header: Sequence[str], rows: Sequence[Sequence[str]], col_widths: Sequence[float]) -> Table:
    """Grid table with a branded header row; long cells wrap."""
    cell = STYLES["cell"]
    data = [list(header)] + [[Paragraph(escape(str(v)), cell) for v in row] for row in rows]
    table = Table(data, colWidths=list(col_widths), repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), BRAND),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, 0), 8),
                ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F7F2F2")]),
                ("GRID", (0, 0), (-1, -1), 0.4, colors.HexColor("#C8C8C8")),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    return table


class NumberedCanvas(canvas.Canvas):
    """Canvas that stamps 'Page i of n' and footer lines once the page count is known."""

    def __init__(self, *args, footer_lines: Sequence[str] = (), **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states: List[dict] = []
        self._footer_lines = list(footer_lines)

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_footer(total)
            super().showPage()
        super().save()

    def _draw_footer(self, total: int) -> None:
        width, _ = self._pagesize
        self.saveState()
        self.setFont("Helvetica", 8)
        self.setFillColor(MUTED)
        self.drawCentredString(width / 2, 1.2 * cm, f"Page {self._pageNumber} of {total}")
        y = 0.8 * cm
        for line in self._footer_lines:
            self.drawCentredString(width / 2, y, line)
            y -= 0.35 * cm
        self.restoreState()
