from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Optional, Union

from ..core.exceptions import ValidationError


def parse_iso_date(value: Union[str, date]) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: Union[str, time, None], field_name: str) -> Optional[time]:
    """Parse HH:MM (seconds optional); empty means absent."""
    if value is None or isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be HH:MM")
    v = value.strip()
    if not v:
        return None
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"{field_name} must be HH:MM")


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
