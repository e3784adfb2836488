"""Financial report commands."""

import click
from officeledger.cli.date_filters import resolve_cli_period
from officeledger.cli.error_handling import handle_domain_error
from officeledger.domain.account import AccountService
from officeledger.domain.entities import (
    AccountBalance,
    AccountLedger,
    DateRange,
    NormalBalance,
    ReportBundle,
    ReportStatus,
)
from officeledger.domain.errors import DomainError
from officeledger.domain.periods import PERIOD_CHOICES, ReportPeriod
from officeledger.domain.report import ReportService
from officeledger.utils.amount_parser import format_amount

LINE_WIDTH = 72

STATUS_LABELS = {
    ReportStatus.BALANCED: "BALANCED",
    ReportStatus.UNBALANCED: "UNBALANCED",
    ReportStatus.EMPTY: "NO TRANSACTIONS",
    ReportStatus.INTEGRITY_ERROR: "INTEGRITY ERRORS",
}

_PERIOD_OPTIONS = [
    click.option(
        "--period",
        type=click.Choice(PERIOD_CHOICES),
        help="Reporting period (default: current-month)",
    ),
    click.option("--start-date", help="Start date for a custom period (YYYY-MM-DD)"),
    click.option("--end-date", help="End date for a custom period (YYYY-MM-DD)"),
    click.option(
        "--strict",
        is_flag=True,
        help="Fail on the first invalid transaction instead of reporting it",
    ),
]


def report_options(func):
    """Attach the shared period options to a report command."""
    for option in reversed(_PERIOD_OPTIONS):
        func = option(func)
    return func


def _build_bundle(ctx, period, start_date, end_date, strict) -> ReportBundle:
    resolved_period, date_range = resolve_cli_period(
        ctx,
        period=period,
        start_date=start_date,
        end_date=end_date,
        default_period=ReportPeriod.CURRENT_MONTH,
    )
    service = ReportService(ctx.obj["db"])
    try:
        return service.generate_for_range(resolved_period, date_range, strict=strict)
    except DomainError as e:
        handle_domain_error(ctx, e)


def _echo_header(title: str, bundle: ReportBundle) -> None:
    click.echo(f"\n{title}")
    click.echo(f"Period: {bundle.date_range.label}")
    click.echo("=" * LINE_WIDTH)


def _echo_line(label: str, amount, indent: int = 0) -> None:
    text = " " * indent + label
    click.echo(f"{text:<{LINE_WIDTH - 18}}{format_amount(amount):>18}")


def _echo_lines(lines: tuple[AccountBalance, ...]) -> None:
    for line in lines:
        marker = " *" if line.is_abnormal else ""
        _echo_line(f"{line.name}{marker}", line.signed_balance, indent=2)


def _echo_diagnostics(bundle: ReportBundle) -> None:
    for issue in bundle.diagnostics.integrity_issues:
        click.echo(f"Warning: {issue.message}", err=True)
    skipped = bundle.diagnostics.skipped_undated
    if skipped:
        click.echo(
            f"Warning: {len(skipped)} transaction{'s' if len(skipped) != 1 else ''} "
            "skipped because of unparsable dates",
            err=True,
        )


def _echo_empty_state(bundle: ReportBundle) -> bool:
    if bundle.is_empty and not bundle.diagnostics.has_integrity_issues:
        click.echo("No transactions found for this period.")
        return True
    return False


def render_trial_balance(bundle: ReportBundle) -> None:
    """Print the trial balance table."""
    _echo_header("TRIAL BALANCE", bundle)
    _echo_diagnostics(bundle)
    if _echo_empty_state(bundle):
        return

    tb = bundle.trial_balance
    click.echo(f"{'Account':30s} {'Type':10s} {'Debit':>14s} {'Credit':>14s}")
    click.echo("-" * LINE_WIDTH)
    for section in tb.sections:
        for row in section.rows:
            amount = format_amount(row.balance_amount)
            is_debit = row.balance_type == NormalBalance.DEBIT
            debit, credit = (amount, "") if is_debit else ("", amount)
            name = f"{row.name}{' *' if row.is_abnormal else ''}"
            click.echo(f"{name[:30]:30s} {section.account_type.value:10s} {debit:>14s} {credit:>14s}")
    click.echo("-" * LINE_WIDTH)
    click.echo(
        f"{'TOTAL':30s} {'':10s} {format_amount(tb.total_debits):>14s} "
        f"{format_amount(tb.total_credits):>14s}"
    )
    if tb.abnormal_rows:
        click.echo("* abnormal balance")

    status = ReportStatus.BALANCED if tb.is_balanced else ReportStatus.UNBALANCED
    if bundle.diagnostics.has_integrity_issues:
        status = ReportStatus.INTEGRITY_ERROR
    click.echo(f"\nStatus: {STATUS_LABELS[status]}")
    if not tb.is_balanced:
        click.echo(f"Difference: {format_amount(tb.difference)}")


def render_income_statement(bundle: ReportBundle) -> None:
    """Print the income statement."""
    _echo_header("INCOME STATEMENT", bundle)
    _echo_diagnostics(bundle)
    if _echo_empty_state(bundle):
        return

    income = bundle.income_statement
    click.echo("REVENUE")
    _echo_lines(income.revenue_lines)
    _echo_line("Total Revenue", income.total_revenue)
    if income.cogs_lines:
        click.echo("\nCOST OF GOODS SOLD")
        _echo_lines(income.cogs_lines)
        _echo_line("Gross Profit", income.gross_profit)
    click.echo("\nOPERATING EXPENSES")
    _echo_lines(income.operating_expense_lines)
    _echo_line("Total Operating Expenses", income.operating_expenses)
    click.echo("-" * LINE_WIDTH)
    label = "NET PROFIT" if income.net_profit >= 0 else "NET LOSS"
    _echo_line(label, income.net_profit)


def render_balance_sheet(bundle: ReportBundle) -> None:
    """Print the balance sheet."""
    _echo_header("BALANCE SHEET", bundle)
    _echo_diagnostics(bundle)
    if _echo_empty_state(bundle):
        return

    sheet = bundle.balance_sheet
    click.echo("ASSETS")
    _echo_lines(sheet.asset_lines)
    _echo_line("Total Assets", sheet.total_assets)

    click.echo("\nLIABILITIES")
    _echo_lines(sheet.liability_lines)
    _echo_line("Total Liabilities", sheet.total_liabilities)

    click.echo("\nEQUITY")
    _echo_lines(sheet.capital_lines)
    _echo_line("Net Profit", sheet.net_profit, indent=2)
    if sheet.drawings_lines:
        _echo_line("Less: Drawings", -sheet.drawings_balance, indent=2)
    _echo_line("Total Equity", sheet.total_equity)
    click.echo("-" * LINE_WIDTH)
    _echo_line("Total Liabilities + Equity", sheet.total_liabilities_and_equity)

    if sheet.accounting_equation_balanced:
        click.echo("\nAccounting equation: BALANCED")
    else:
        click.echo(f"\nAccounting equation: UNBALANCED (difference {format_amount(sheet.difference)})")


def render_summary(bundle: ReportBundle, totals: dict) -> None:
    """Print headline totals and the overall status."""
    _echo_header("FINANCIAL SUMMARY", bundle)
    _echo_diagnostics(bundle)
    for key, amount in totals.items():
        _echo_line(key.replace("_", " ").title(), amount)
    click.echo("-" * LINE_WIDTH)
    click.echo(f"Transactions: {bundle.transaction_count}")
    click.echo(f"Status: {STATUS_LABELS[bundle.status]}")



def render_ledger(ledger: AccountLedger, date_range: DateRange) -> None:
    """Print one account's ledger with debit and credit columns and a running balance."""
    account = ledger.account
    click.echo(f"\nGENERAL LEDGER: {account.name}")
    click.echo(f"Period: {date_range.label}")
    click.echo(
        f"Type: {account.type.value}  Normal balance: {account.resolved_normal_balance.value}"
    )
    click.echo("=" * LINE_WIDTH)
    if ledger.is_empty:
        click.echo("No transactions found for this period.")
        return

    click.echo(f"{'Date':10s} {'Description':20s} {'Debit':>12s} {'Credit':>12s} {'Balance':>13s}")
    click.echo("-" * LINE_WIDTH)
    for entry in ledger.entries:
        txn = entry.transaction
        debit = format_amount(entry.amount) if entry.is_debit else ""
        credit = "" if entry.is_debit else format_amount(entry.amount)
        click.echo(
            f"{str(txn.date):10s} {(txn.description or '')[:20]:20s} "
            f"{debit:>12s} {credit:>12s} {format_amount(entry.running_balance):>13s}"
        )
    click.echo("-" * LINE_WIDTH)
    click.echo(
        f"{'TOTAL':31s} {format_amount(ledger.total_debits):>12s} "
        f"{format_amount(ledger.total_credits):>12s}"
    )
    click.echo(
        f"\nEnding balance: {format_amount(ledger.ending_balance)} {ledger.balance_side.value}"
    )


@click.group()
def report_group():
    """Produce financial statements for a period."""
    pass


@report_group.command("trial-balance")
@report_options
@click.pass_context
def trial_balance(ctx, period, start_date, end_date, strict):
    """Show the trial balance."""
    render_trial_balance(_build_bundle(ctx, period, start_date, end_date, strict))


@report_group.command("income-statement")
@report_options
@click.pass_context
def income_statement(ctx, period, start_date, end_date, strict):
    """Show the income statement."""
    render_income_statement(_build_bundle(ctx, period, start_date, end_date, strict))


@report_group.command("balance-sheet")
@report_options
@click.pass_context
def balance_sheet(ctx, period, start_date, end_date, strict):
    """Show the balance sheet."""
    render_balance_sheet(_build_bundle(ctx, period, start_date, end_date, strict))


@report_group.command("summary")
@report_options
@click.pass_context
def summary(ctx, period, start_date, end_date, strict):
    """Show headline totals for all three statements."""
    bundle = _build_bundle(ctx, period, start_date, end_date, strict)
    render_summary(bundle, ReportService(ctx.obj["db"]).get_totals(bundle))


@report_group.command("ledger")
@click.argument("account")
@report_options
@click.pass_context
def ledger(ctx, account, period, start_date, end_date, strict):
    """Show the general ledger of ACCOUNT (name or ID)."""
    _, date_range = resolve_cli_period(
        ctx,
        period=period,
        start_date=start_date,
        end_date=end_date,
        default_period=ReportPeriod.CURRENT_MONTH,
    )
    db = ctx.obj["db"]
    try:
        resolved = AccountService(db).resolve_account(account)
        account_ledger = ReportService(db).generate_ledger(resolved, date_range, strict=strict)
    except DomainError as e:
        handle_domain_error(ctx, e)
    render_ledger(account_ledger, date_range)


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
