"""Tests for date parser with relative dates and window bounds."""

import pytest
from datetime import date, datetime, time, timedelta, timezone
from brokerage.utils.date_parser import (
    get_date_range,
    parse_date,
    parse_timestamp,
    parse_window_bound,
    window_end,
    window_start,
)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today_and_yesterday():
    assert parse_date("today") == date.today()
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


def test_parse_this_month():
    """'this month' is the first day of the current month."""
    assert parse_date("this month") == date.today().replace(day=1)


def test_parse_invalid_date():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


def test_last_month_range_covers_whole_month():
    start, end = get_date_range("last-month")
    first_of_this_month = date.today().replace(day=1)

    assert start.day == 1
    assert end == first_of_this_month - timedelta(days=1)
    assert start.month == end.month


def test_last_week_is_monday_to_sunday():
    start, end = get_date_range("last-week")

    assert start.weekday() == 0
    assert end - start == timedelta(days=6)


def test_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-month")


def test_parse_timestamp_normalizes_to_naive_utc():
    result = parse_timestamp("2020-08-15T21:11:26+02:00")

    assert result == datetime(2020, 8, 15, 19, 11, 26)
    assert result.tzinfo is None


def test_window_bound_keeps_dates_and_timestamps_apart():
    assert parse_window_bound("2020-08-15") == date(2020, 8, 15)
    assert parse_window_bound("2020-08-15 19:11") == datetime(2020, 8, 15, 19, 11)
    assert parse_window_bound("2020-08-15T19:11:26.522Z") == datetime(2020, 8, 15, 19, 11, 26, 522000)


def test_window_covers_whole_days_for_dates():
    assert window_start(date(2020, 8, 15)) == datetime(2020, 8, 15, 0, 0)
    assert window_end(date(2020, 8, 15)) == datetime.combine(date(2020, 8, 15), time.max)


def test_window_keeps_exact_datetimes():
    aware = datetime(2020, 8, 15, 12, 0, tzinfo=timezone.utc)

    assert window_end(aware) == datetime(2020, 8, 15, 12, 0)
    assert window_start(datetime(2020, 8, 15, 12, 0)) == datetime(2020, 8, 15, 12, 0)
