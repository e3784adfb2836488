"""Reporting period resolution."""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta

from officeledger.domain.entities import DateRange
from officeledger.domain.errors import ValidationError
from officeledger.utils.date_parser import format_long_date, parse_date, start_of_week


class ReportPeriod(str, Enum):
    """Period specifiers accepted by the report generator."""

    CURRENT_WEEK = "current-week"
    CURRENT_MONTH = "current-month"
    CURRENT_YEAR = "current-year"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    CUSTOM = "custom"
    ALL = "all"


PERIOD_CHOICES = tuple(period.value for period in ReportPeriod)


def parse_period(period: "str | ReportPeriod") -> ReportPeriod:
    """Normalize a period specifier.

    Raises:
        ValidationError: If the specifier is not recognized
    """
    if isinstance(period, ReportPeriod):
        return period
    try:
        return ReportPeriod(period.strip().lower())
    except (ValueError, AttributeError):
        raise ValidationError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(PERIOD_CHOICES)}"
        )


def _to_date(value: "date | datetime | str", today: date, field: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_date(value, today=today)
    except (ValueError, AttributeError) as e:
        raise ValidationError(f"Invalid {field}: {e}")


def make_date_range(start: date, end: date) -> DateRange:
    """Build an inclusive date range with a display label."""
    return DateRange(
        start=start,
        end=end,
        label=f"{format_long_date(start)} - {format_long_date(end)}",
    )


def resolve_period(
    period: "str | ReportPeriod",
    today: Optional[date] = None,
    start_date: "date | str | None" = None,
    end_date: "date | str | None" = None,
) -> DateRange:
    """Resolve a period specifier into an inclusive date window.

    Current periods run from their first day to today; "weekly", "monthly"
    and "yearly" cover the previous full week (Sunday to Saturday), month or
    year. "custom" uses the caller's dates, both required. "all" has no
    bounds.

    Args:
        period: Period specifier
        today: Reference day (defaults to date.today())
        start_date: Start of a custom range
        end_date: End of a custom range

    Returns:
        DateRange for the period

    Raises:
        ValidationError: If the period is unknown or the custom range is invalid
    """
    period = parse_period(period)
    today = today or date.today()

    if period == ReportPeriod.CURRENT_WEEK:
        return make_date_range(start_of_week(today), today)

    elif period == ReportPeriod.CURRENT_MONTH:
        return make_date_range(today.replace(day=1), today)

    elif period == ReportPeriod.CURRENT_YEAR:
        return make_date_range(today.replace(month=1, day=1), today)

    elif period == ReportPeriod.WEEKLY:
        start = start_of_week(today) - timedelta(days=7)
        return make_date_range(start, start + timedelta(days=6))

    elif period == ReportPeriod.MONTHLY:
        start = (today - relativedelta(months=1)).replace(day=1)
        end = today.replace(day=1) - timedelta(days=1)
        return make_date_range(start, end)

    elif period == ReportPeriod.YEARLY:
        return make_date_range(date(today.year - 1, 1, 1), date(today.year - 1, 12, 31))

    elif period == ReportPeriod.CUSTOM:
        if start_date is None or end_date is None:
            raise ValidationError("A custom period requires both a start date and an end date")
        start = _to_date(start_date, today, "start date")
        end = _to_date(end_date, today, "end date")
        if start > end:
            raise ValidationError(f"Start date {start} is after end date {end}")
        return make_date_range(start, end)

    return DateRange(start=None, end=None, label="All Time")
