from __future__ import annotations

from datetime import date, datetime

import pytest

from ogo_manager.common.datetime_utils import parse_optional_date
from ogo_manager.common.validators import require_max_length
from ogo_manager.core.exceptions import ValidationError


def test_parse_optional_date_accepts_strings_and_dates():
    assert parse_optional_date("2024-03-05", "Deadline") == date(2024, 3, 5)
    assert parse_optional_date("2024-03-05T10:00:00", "Deadline") == date(2024, 3, 5)
    assert parse_optional_date(date(2024, 3, 5), "Deadline") == date(2024, 3, 5)
    assert parse_optional_date(datetime(2024, 3, 5, 8, 30), "Deadline") == date(2024, 3, 5)
    assert parse_optional_date(None, "Deadline") is None
    assert parse_optional_date("  ", "Deadline") is None


@pytest.mark.parametrize("value", [20240101, 2024.1, ["2024-01-01"], {"d": 1}, "05/03/2024"])
def test_parse_optional_date_rejects_other_values(value):
    with pytest.raises(ValidationError, match="Deadline must be a date"):
        parse_optional_date(value, "Deadline")


def test_require_max_length():
    assert require_max_length("abc", "Code", 3) == "abc"
    with pytest.raises(ValidationError, match="Code must be at most 3 characters"):
        require_max_length("abcd", "Code", 3)
