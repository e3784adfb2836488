"""Journal entry commands."""

import click
from officeledger.cli.date_filters import resolve_cli_period
from officeledger.cli.error_handling import handle_domain_error
from officeledger.domain.account import AccountService
from officeledger.domain.errors import DomainError
from officeledger.domain.periods import PERIOD_CHOICES
from officeledger.domain.transaction import TransactionService
from officeledger.utils.amount_parser import format_amount, parse_amount
from officeledger.utils.date_parser import parse_date


@click.group()
def journal_group():
    """Post and review journal entries."""
    pass


@journal_group.command("add")
@click.option("--debit", "debit_account", required=True, help="Account to debit (name or ID)")
@click.option("--credit", "credit_account", required=True, help="Account to credit (name or ID)")
@click.option("--amount", required=True, help="Amount applied to both legs (e.g., 1000 or 1,250.50)")
@click.option(
    "--date",
    "entry_date",
    default="today",
    show_default=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", help="Entry description")
@click.pass_context
def add_entry(
    ctx,
    debit_account: str,
    credit_account: str,
    amount: str,
    entry_date: str,
    description: str | None,
):
    """Post a journal entry.

    Examples:
        officeledger journal add --debit "Cash on Hand" --credit "Owner's Capital" --amount 1000
        officeledger journal add --debit 1 --credit 17 --amount 500 --date 2026-03-02 --description "Cash sale"
    """
    db = ctx.obj["db"]
    account_service = AccountService(db)
    transaction_service = TransactionService(db)

    try:
        txn_date = parse_date(entry_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        debit = account_service.resolve_account(debit_account)
        credit = account_service.resolve_account(credit_account)
        transaction_id = transaction_service.create_transaction(
            date=txn_date,
            debit_account_id=debit.id,
            credit_account_id=credit.id,
            amount=txn_amount,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Debit: {debit.name}")
    click.echo(f"  Credit: {credit.name}")
    click.echo(f"  Amount: {format_amount(txn_amount)}")
    if description:
        click.echo(f"  Description: {description}")


@journal_group.command("list")
@click.option("--period", type=click.Choice(PERIOD_CHOICES), help="Reporting period (default: all)")
@click.option("--start-date", help="Start date for a custom period")
@click.option("--end-date", help="End date for a custom period")
@click.option("--account", help="Only entries touching this account (name or ID)")
@click.pass_context
def list_entries(ctx, period: str | None, start_date: str | None, end_date: str | None, account: str | None):
    """List journal entries."""
    db = ctx.obj["db"]
    account_service = AccountService(db)
    transaction_service = TransactionService(db)

    _, date_range = resolve_cli_period(
        ctx, period=period, start_date=start_date, end_date=end_date
    )

    account_id = None
    if account:
        try:
            account_id = account_service.resolve_account(account).id
        except DomainError as e:
            handle_domain_error(ctx, e)

    transactions = transaction_service.list_transactions(
        start_date=date_range.start, end_date=date_range.end, account_id=account_id
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    names = {acc.id: acc.name for acc in account_service.list_accounts()}

    click.echo(f"\nJournal ({date_range.label}):")
    click.echo("-" * 100)
    click.echo(f"{'ID':>4s}  {'Date':10s}  {'Debit':22s}  {'Credit':22s}  {'Amount':>14s}  Description")
    click.echo("-" * 100)
    for txn in transactions:
        click.echo(
            f"{txn.id:4d}  {txn.date.isoformat():10s}  "
            f"{names.get(txn.debit_account_id, '?')[:22]:22s}  "
            f"{names.get(txn.credit_account_id, '?')[:22]:22s}  "
            f"{format_amount(txn.amount):>14s}  {txn.description or ''}"
        )
    click.echo("-" * 100)
    click.echo(f"{len(transactions)} transaction{'s' if len(transactions) != 1 else ''}")


@journal_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_entry(ctx, transaction_id: int):
    """Delete a journal entry."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(journal_group, name="journal")
