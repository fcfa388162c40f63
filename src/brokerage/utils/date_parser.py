"""Date parsing utilities for report windows."""

import re
from datetime import UTC, date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")

_TIME_PART = re.compile(r"\d{1,2}:\d{2}|\d{4}-\d{2}-\d{2}[tT ]\d")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative forms "today", "yesterday", "this week/month/year" and
    "last week/month/year" (each resolving to the first day of the period).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    for prefix in ("this ", "last "):
        if date_str.startswith(prefix):
            period = date_str[len(prefix):]
            if period in ("week", "month", "year"):
                start, _ = get_date_range(f"{prefix.strip()}-{period}")
                return start

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get start and end dates for a named period.

    "this-*" periods end today; "last-*" periods cover the whole previous
    week (Monday to Sunday), month or year.

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = date.today()
    monday = today - timedelta(days=today.weekday())
    first_of_month = today.replace(day=1)
    first_of_year = today.replace(month=1, day=1)

    if period == "this-week":
        return monday, today
    if period == "this-month":
        return first_of_month, today
    if period == "this-year":
        return first_of_year, today
    if period == "last-week":
        start = monday - timedelta(days=7)
        return start, start + timedelta(days=6)
    if period == "last-month":
        return first_of_month - relativedelta(months=1), first_of_month - timedelta(days=1)
    if period == "last-year":
        return first_of_year - relativedelta(years=1), first_of_year - timedelta(days=1)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")


def to_naive_utc(value: datetime) -> datetime:
    """Normalize a datetime to naive UTC, the form stored in the ledger."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def parse_timestamp(value: str) -> datetime:
    """Parse an absolute timestamp string (e.g. "2020-08-15T19:11:26").

    Raises:
        ValueError: If the string cannot be parsed
    """
    try:
        dt = date_parser.parse(value.strip())
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{value}': {e}")
    return to_naive_utc(dt)


def parse_window_bound(value: str) -> date | datetime:
    """Parse a report window bound.

    Strings with a time part become datetimes. Anything else goes through
    parse_date, so relative dates like "last month" keep working and the
    result stays a plain date covering the whole day.
    """
    text = value.strip()
    if _TIME_PART.search(text):
        return parse_timestamp(text)
    return parse_date(text)


def window_start(value: date | datetime) -> datetime:
    """Return the first instant covered by an inclusive window bound."""
    if isinstance(value, datetime):
        return to_naive_utc(value)
    return datetime.combine(value, time.min)


def window_end(value: date | datetime) -> datetime:
    """Return the last instant covered by an inclusive window bound."""
    if isinstance(value, datetime):
        return to_naive_utc(value)
    return datetime.combine(value, time.max)
