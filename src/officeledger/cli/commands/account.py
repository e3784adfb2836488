"""Chart of accounts commands."""

import click
from officeledger.cli.error_handling import handle_domain_error
from officeledger.domain.account import AccountService
from officeledger.domain.entities import AccountRole, AccountType, NormalBalance
from officeledger.domain.errors import DomainError

ACCOUNT_TYPES = [t.value for t in AccountType]
NORMAL_BALANCES = [n.value for n in NormalBalance]
ROLES = [r.value for r in AccountRole]


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type",
    "account_type",
    required=True,
    type=click.Choice(ACCOUNT_TYPES, case_sensitive=False),
    help="Account type",
)
@click.option(
    "--normal-balance",
    type=click.Choice(NORMAL_BALANCES, case_sensitive=False),
    help="Override the normal balance side implied by the type",
)
@click.option(
    "--role",
    type=click.Choice(ROLES, case_sensitive=False),
    help="Structural role (inferred from 'Drawings' / 'Cost of Goods Sold' if omitted)",
)
@click.pass_context
def create_account(
    ctx, name: str, account_type: str, normal_balance: str | None, role: str | None
):
    """Create a new account.

    Examples:
        officeledger account create "Cash on Hand" --type Asset
        officeledger account create "Drawings" --type Equity
        officeledger account create "Owner Withdrawals" --type Equity --role drawings
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        account_id = service.create_account(
            name=name,
            account_type=account_type,
            normal_balance=normal_balance,
            role=role,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    created = service.get_account(account_id)
    click.echo(f"Created account '{name}' (ID: {account_id})")
    click.echo(f"Type: {created.type.value}, normal balance: {created.resolved_normal_balance.value}")
    if created.role is not None:
        click.echo(f"Role: {created.role.value}")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 70)
    for acc in accounts:
        role = f" | Role: {acc.role.value}" if acc.role else ""
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:28s} | {acc.type.value:9s} | "
            f"{acc.resolved_normal_balance.value}{role}"
        )


@account_group.command("rename")
@click.argument("account", metavar="ACCOUNT")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_account(ctx, account: str, new_name: str) -> None:
    """Rename an account.

    ACCOUNT can be an account name or ID. The account keeps its type and role.

    Examples:
        officeledger account rename "Bank Account" "Main Checking"
        officeledger account rename 3 "Trade Receivables"
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        acc = service.resolve_account(account)
        service.rename_account(acc.id, new_name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Renamed account {acc.id} from '{acc.name}' to '{new_name}'")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def delete_account(ctx, account: str) -> None:
    """Delete an account that no journal entry uses.

    ACCOUNT can be an account name or ID.
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        acc = service.resolve_account(account)
        service.delete_account(acc.id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted account '{acc.name}' (ID: {acc.id})")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
