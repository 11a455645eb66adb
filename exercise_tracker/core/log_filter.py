# exercise_tracker/core/log_filter.py

from datetime import date
from typing import List, Optional

from exercise_tracker.core.dates import EPOCH_START, canonical_date, parse_calendar_date


def normalize_log(entries: List[dict]) -> List[dict]:
    """
    Project stored entries to {description, duration, date} with the date
    re-rendered canonically.
    """
    return [
        {
            "description": entry["description"],
            "duration": entry["duration"],
            "date": canonical_date(entry["date"]),
        }
        for entry in entries
    ]


def filter_log(
    entries: List[dict],
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    limit: Optional[int] = None,
    as_of: Optional[date] = None,
) -> List[dict]:
    """
    Keep entries dated within [date_from, date_to] (inclusive, calendar
    dates only), then the first `limit` of them in log order.

    A missing bound defaults to 1970-01-01 / `as_of`; the range is only
    applied when at least one bound is given.
    """
    result = list(entries)

    if date_from is not None or date_to is not None:
        lower = date_from or EPOCH_START
        upper = date_to or as_of or date.today()
        result = [
            entry
            for entry in result
            if lower <= parse_calendar_date(entry["date"]) <= upper
        ]

    if limit is not None:
        result = result[:limit]

    return result
