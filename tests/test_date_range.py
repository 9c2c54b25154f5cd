"""Tests: Validierung startDate / endDate"""

from datetime import date

import pytest

from modules.dashboard.services.date_range import parse_date_range
from modules.shared.config import DEFAULT_END_DATE, DEFAULT_START_DATE
from modules.shared.errors import ValidationError


def test_valid_range():
    date_range = parse_date_range("2025-08-01", "2025-08-31")

    assert date_range.start_date == date(2025, 8, 1)
    assert date_range.end_date == date(2025, 8, 31)
    assert date_range.to_dict() == {"startDate": "2025-08-01", "endDate": "2025-08-31"}


def test_single_day_range():
    date_range = parse_date_range("2025-08-01", "2025-08-01")
    assert date_range.start_date == date_range.end_date


def test_defaults_when_missing():
    date_range = parse_date_range(None, None)

    assert date_range.start == DEFAULT_START_DATE
    assert date_range.end == DEFAULT_END_DATE


@pytest.mark.parametrize("start,end", [
    ("2025/08/01", "2025-08-07"),
    ("2025-8-1", "2025-08-07"),
    ("2025-08-01", "yesterday"),
])
def test_invalid_format(start, end):
    with pytest.raises(ValidationError) as exc_info:
        parse_date_range(start, end)

    assert exc_info.value.status_code == 400
    assert exc_info.value.error == "Invalid date format"


def test_non_calendar_date():
    with pytest.raises(ValidationError) as exc_info:
        parse_date_range("2025-02-30", "2025-03-01")
    assert exc_info.value.error == "Invalid date range"


def test_start_after_end():
    with pytest.raises(ValidationError) as exc_info:
        parse_date_range("2025-08-10", "2025-08-01")
    assert exc_info.value.message == "Start date must be before end date"


def test_range_too_long():
    with pytest.raises(ValidationError):
        parse_date_range("2025-01-01", "2025-12-31", max_days=30)
