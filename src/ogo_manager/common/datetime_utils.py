from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Any, field_name: str) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    v = (value or "").strip()
    if not v:
        return None
    try:
        return parse_iso_date(v[:10])
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_key(value: datetime) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def month_name(month: int) -> str:
    return calendar.month_name[month]


def short_month_label(key: str) -> str:
    """'2024-03' -> 'Mar 2024'."""
    year_s, month_s = key.split("-")
    return f"{calendar.month_abbr[int(month_s)]} {year_s}"


def years_between(start: date, today: date) -> int:
    years = today.year - start.year
    if (today.month, today.day) < (start.month, start.day):
        years -= 1
    return years
