from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Any, Callable, Mapping, Optional

from flask import current_app, jsonify, request, session

from ..analytics.model import PeriodFilter
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .validators import parse_optional_int

logger = logging.getLogger(__name__)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def handle_errors(action: str) -> Callable:
    """Map domain errors of a JSON endpoint to status codes.

    Anything unexpected is logged and reported as a generic failure.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return fail(str(e), 400)
            except NotFoundError as e:
                return fail(str(e), 404)
            except AuthenticationError as e:
                return fail(str(e), 403)
            except Exception as e:
                logger.exception("Unexpected error while trying to %s", action)
                if bool(current_app.config.get("DEBUG", False)):
                    return fail(f"System error while trying to {action}: {e}", 500)
                return fail(f"System error while trying to {action}", 500)

        return wrapper

    return decorator


ALL = "all"


def parse_month(value: Any) -> Optional[int]:
    month = parse_optional_int(value, "Month")
    if month is not None and not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return month


def period_from(source: Mapping[str, Any], *, today: date) -> PeriodFilter:
    """Month/year filter from request values: missing means the current one, 'all' means no filter."""
    raw_month = source.get("month")
    raw_year = source.get("year")

    if raw_month is None or str(raw_month).strip() == "":
        month: Optional[int] = today.month
    elif str(raw_month).strip().lower() == ALL:
        month = None
    else:
        month = parse_month(raw_month)

    if raw_year is None or str(raw_year).strip() == "":
        year: Optional[int] = today.year
    elif str(raw_year).strip().lower() == ALL:
        year = None
    else:
        year = parse_optional_int(raw_year, "Year")

    return PeriodFilter(month=month, year=year)
