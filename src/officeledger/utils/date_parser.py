"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def start_of_week(day: date) -> date:
    """Return the Sunday on or before the given day."""
    days_since_sunday = (day.weekday() + 1) % 7
    return day - timedelta(days=days_since_sunday)


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and relative
    ones: "today", "yesterday", and "this"/"last" followed by "week",
    "month" or "year", which resolve to the first day of that period.
    Weeks start on Sunday.

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this week": start_of_week(today),
        "this month": today.replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last week": start_of_week(today) - timedelta(days=7),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if text in relative_dates:
        return relative_dates[text]

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


# Two unrelated defaults: a field dateutil filled in differs between them
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _parse_complete_date(text: str) -> Optional[date]:
    """Parse free-form text that names a full date, None for fragments like "March"."""
    try:
        first, second = [date_parser.parse(text, default=d) for d in _FILL_DEFAULTS]
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first.date()


def coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion of a stored date value, None when unparsable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date_parser.isoparse(value.strip()).date()
        except ValueError:
            return _parse_complete_date(value)
    return None


def format_long_date(value: date) -> str:
    """Format a date as e.g. 'March 5, 2026'."""
    return f"{value:%B} {value.day}, {value.year}"
