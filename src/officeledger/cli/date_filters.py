"""CLI helpers for reporting period resolution."""

from datetime import date

import click

from officeledger.domain.entities import DateRange
from officeledger.domain.errors import ValidationError
from officeledger.domain.periods import ReportPeriod, parse_period, resolve_period


def resolve_cli_period(
    ctx: click.Context,
    *,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    default_period: ReportPeriod = ReportPeriod.ALL,
    today: date | None = None,
) -> tuple[ReportPeriod, DateRange]:
    """Resolve --period/--start-date/--end-date into a period and window.

    Explicit dates without --period imply a custom range. Any other mix of
    a preset period with explicit dates is rejected.
    """
    if period is None:
        period = ReportPeriod.CUSTOM.value if (start_date or end_date) else default_period.value

    if period != ReportPeriod.CUSTOM.value and (start_date or end_date):
        click.echo(
            "Error: --start-date and --end-date can only be used with --period custom.",
            err=True,
        )
        ctx.exit(1)

    try:
        date_range = resolve_period(
            period, today=today, start_date=start_date, end_date=end_date
        )
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    return parse_period(period), date_range
