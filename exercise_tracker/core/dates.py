# exercise_tracker/core/dates.py
"""
Calendar-date handling for exercise entries.

Every entry date is stored and returned in one canonical rendering,
e.g. "Sun Jan 15 2023". Inputs are accepted in a handful of common forms
and converted to that rendering.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

from exercise_tracker.core.errors import InvalidInputError

CANONICAL_DATE_FORMAT = "%a %b %d %Y"

EPOCH_START = date(1970, 1, 1)

# Tried in order after ISO 8601
_INPUT_FORMATS = (
    CANONICAL_DATE_FORMAT,
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Stored as a signed 64-bit INTEGER
DURATION_MIN = -(2 ** 63)
DURATION_MAX = 2 ** 63 - 1


def today(tz_name: str = "UTC") -> date:
    return datetime.now(ZoneInfo(tz_name)).date()


def format_calendar_date(value: date) -> str:
    # strftime does not pad years below 1000 on every platform
    return f"{value:%a %b %d} {value.year:04d}"


def parse_calendar_date(value: str, field: str = "date") -> date:
    """
    Parse a textual date into a calendar date.

    ISO dates and datetimes ("2023-01-15", "2023-01-15T08:30:00Z") keep the
    date part as written; the time of day is discarded.
    """
    text = value.strip()
    if not text:
        raise InvalidInputError(f"{field} must be a valid date", field=field)

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in _INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise InvalidInputError(f"{field} must be a valid date", field=field)


def canonical_date(value: str) -> str:
    """Re-render a date string canonically; a no-op for canonical input."""
    return format_calendar_date(parse_calendar_date(value))


def parse_duration(value: Any) -> int:
    """
    Coerce a duration to an integer the way integer-prefix parsing does:
    "30" -> 30, "45min" -> 45, 12.9 -> 12. Anything without a leading
    integer is rejected.
    """
    duration = _coerce_duration(value)
    if not DURATION_MIN <= duration <= DURATION_MAX:
        raise InvalidInputError("duration is out of range", field="duration")
    return duration


def _coerce_duration(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidInputError("duration must be an integer", field="duration")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)

    m = _LEADING_INT.match(value) if isinstance(value, str) else None
    if not m:
        raise InvalidInputError("duration must be an integer", field="duration")
    return int(m.group(1))


def parse_optional_date(value: Optional[str], field: str) -> Optional[date]:
    if value is None or value == "":
        return None
    return parse_calendar_date(value, field=field)
