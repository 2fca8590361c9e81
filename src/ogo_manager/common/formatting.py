from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

Number = Union[Decimal, int, float]


def format_money(amount: Number, currency: str) -> str:
    return f"{currency} {Decimal(str(amount)):,.2f}"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def format_date(value: Optional[date]) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d")


def format_timestamp(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return value.isoformat(sep=" ", timespec="seconds")
