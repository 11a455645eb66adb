# tests/test_dates.py

from datetime import date

import pytest

from exercise_tracker.core.dates import (
    canonical_date,
    format_calendar_date,
    parse_calendar_date,
    parse_duration,
    parse_optional_date,
)
from exercise_tracker.core.errors import InvalidInputError
from exercise_tracker.core.log_filter import filter_log, normalize_log


@pytest.mark.parametrize(
    "text",
    [
        "2023-01-15",
        "2023-01-15T08:30:00",
        "2023-01-15T23:59:59Z",
        "Sun Jan 15 2023",
        "01/15/2023",
        "January 15, 2023",
        "Jan 15, 2023",
        "15 January 2023",
    ],
)
def test_parse_calendar_date_accepted_forms(text):
    assert parse_calendar_date(text) == date(2023, 1, 15)


def test_format_calendar_date_pads_day():
    assert format_calendar_date(date(2024, 1, 1)) == "Mon Jan 01 2024"


def test_canonical_date_is_idempotent():
    once = canonical_date("2023-01-15")
    assert once == "Sun Jan 15 2023"
    assert canonical_date(once) == once


@pytest.mark.parametrize("text", ["", "   ", "soon", "2023-13-45"])
def test_parse_calendar_date_rejects_garbage(text):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_calendar_date(text, field="to")
    assert exc_info.value.http_status == 400
    assert exc_info.value.field == "to"


def test_parse_optional_date_passes_through_missing_values():
    assert parse_optional_date(None, field="from") is None
    assert parse_optional_date("", field="from") is None


@pytest.mark.parametrize(
    "value, expected",
    [("30", 30), (" 12 ", 12), ("45min", 45), ("-5", -5), (20, 20), (12.9, 12)],
)
def test_parse_duration_integer_prefix(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["abc", "", None, True, float("nan"), "min45"])
def test_parse_duration_rejects_non_numeric(value):
    with pytest.raises(InvalidInputError):
        parse_duration(value)


# ---- log filtering ----

def _entry(day, description="run"):
    return {"description": description, "duration": 10, "date": day}


LOG = [
    _entry("Sun Jan 01 2023", "a"),
    _entry("Thu Jun 01 2023", "b"),
    _entry("Fri Dec 01 2023", "c"),
]


def test_normalize_log_renders_dates_canonically():
    stored = [{"description": "x", "duration": 5, "date": "2023-06-01", "user_pk": 1}]
    assert normalize_log(stored) == [{"description": "x", "duration": 5, "date": "Thu Jun 01 2023"}]


def test_filter_log_without_bounds_or_limit_returns_everything():
    assert filter_log(LOG) == LOG


def test_filter_log_range():
    result = filter_log(LOG, date_from=date(2023, 5, 1), date_to=date(2023, 7, 1))
    assert [e["description"] for e in result] == ["b"]


def test_filter_log_open_upper_bound_uses_as_of():
    result = filter_log(LOG, date_from=date(2023, 1, 1), as_of=date(2023, 6, 1))
    assert [e["description"] for e in result] == ["a", "b"]


def test_filter_log_limit_preserves_order():
    assert [e["description"] for e in filter_log(LOG, limit=2)] == ["a", "b"]


def test_filter_log_is_idempotent():
    kwargs = dict(date_from=date(2023, 1, 1), date_to=date(2023, 12, 31), limit=2)
    once = filter_log(LOG, **kwargs)
    assert filter_log(once, **kwargs) == once


def test_filter_log_does_not_mutate_input():
    entries = list(LOG)
    filter_log(entries, limit=1)
    assert entries == LOG


def test_format_calendar_date_pads_early_years():
    assert format_calendar_date(date(999, 5, 1)) == "Wed May 01 0999"
    assert canonical_date("Wed May 01 0999") == "Wed May 01 0999"


@pytest.mark.parametrize("value", [2 ** 63, -(2 ** 63) - 1, str(10 ** 20), 1e20])
def test_parse_duration_rejects_values_outside_64_bits(value):
    with pytest.raises(InvalidInputError) as exc_info:
        parse_duration(value)
    assert exc_info.value.message == "duration is out of range"


def test_parse_duration_accepts_64_bit_bounds():
    assert parse_duration(2 ** 63 - 1) == 2 ** 63 - 1
    assert parse_duration(-(2 ** 63)) == -(2 ** 63)
