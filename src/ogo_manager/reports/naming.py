from __future__ import annotations

from datetime import date

from ..analytics.model import PeriodFilter
from ..common.datetime_utils import month_name

ALL_MONTHS = "All Months"
ALL_YEARS = "All Years"


def period_labels(period: PeriodFilter) -> tuple[str, str]:
    """Human labels for the month and year of a period ('All Months', 'All Years' when unset)."""
    month_label = month_name(period.month) if period.month is not None else ALL_MONTHS
    year_label = str(period.year) if period.year is not None else ALL_YEARS
    return month_label, year_label


def projects_export_basename(period: PeriodFilter) -> str:
    if period.month is not None and period.year is not None:
        return f"projects_{month_name(period.month)}_{period.year}"
    if period.month is not None:
        return f"projects_{month_name(period.month)}_all_years"
    if period.year is not None:
        return f"projects_{period.year}"
    return "projects_all_time"


def report_title(period: PeriodFilter) -> str:
    if period.month is not None and period.year is not None:
        return f"Analytics Report - {month_name(period.month)} {period.year}"
    if period.year is not None:
        return f"Annual Analytics Report - {period.year}"
    if period.month is None:
        return "Comprehensive Analytics Report - All Time"
    return "Analytics Report"


def report_filename(period: PeriodFilter, *, prefix: str, today: date) -> str:
    if period.month is not None and period.year is not None:
        return f"{prefix}-{month_name(period.month)}-{period.year}.pdf"
    if period.year is not None:
        return f"{prefix}-{period.year}.pdf"
    return f"{prefix}-Comprehensive-{today.year}.pdf"


def receipt_filename(project_id: int) -> str:
    return f"project-receipt-{project_id}.pdf"
