"""Validierung der Datumsparameter (startDate / endDate)"""

import re
from datetime import date
from typing import Optional

from modules.shared.config import DEFAULT_START_DATE, DEFAULT_END_DATE, MAX_RANGE_DAYS
from modules.shared.errors import ValidationError
from modules.shared.models import DateRange

_DATE_FORMAT = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date_range(start_date: Optional[str], end_date: Optional[str],
                     max_days: int = MAX_RANGE_DAYS) -> DateRange:
    """
    Prüft und parst ein Datumsintervall im Format YYYY-MM-DD.

    Fehlende Werte werden durch die Defaults aus der Konfiguration ersetzt.

    Raises:
        ValidationError: Format ungültig, kein Kalenderdatum, Start nach Ende
            oder Intervall länger als max_days
    """
    start_date = start_date or DEFAULT_START_DATE
    end_date = end_date or DEFAULT_END_DATE

    if not _DATE_FORMAT.match(start_date) or not _DATE_FORMAT.match(end_date):
        raise ValidationError(
            "Please use YYYY-MM-DD format for startDate and endDate",
            error="Invalid date format",
        )

    try:
        start = date.fromisoformat(start_date)
        end = date.fromisoformat(end_date)
    except ValueError:
        raise ValidationError("Invalid dates provided", error="Invalid date range")

    if start > end:
        raise ValidationError("Start date must be before end date", error="Invalid date range")

    if (end - start).days > max_days:
        raise ValidationError(f"Date range cannot exceed {max_days} days", error="Invalid date range")

    return DateRange(start_date=start, end_date=end)
