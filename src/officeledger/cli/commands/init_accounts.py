"""Initialize the default chart of accounts."""

import click
from officeledger.domain.account import AccountService
from officeledger.domain.errors import DomainError


# Default chart of accounts: (name, type)
INITIAL_ACCOUNTS = [
    # Current assets
    ("Cash on Hand", "Asset"),
    ("Bank Account", "Asset"),
    ("Accounts Receivable", "Asset"),
    ("Inventory", "Asset"),
    # Fixed assets
    ("Furniture & Fixtures", "Asset"),
    ("Office Equipment", "Asset"),
    ("Vehicles", "Asset"),
    ("Building & Land", "Asset"),
    # Current liabilities
    ("Accounts Payable", "Liability"),
    ("Salaries Payable", "Liability"),
    ("Tax Payable", "Liability"),
    ("Utilities Payable", "Liability"),
    # Long-term liabilities
    ("Bank Loan (Long Term)", "Liability"),
    # Equity
    ("Owner's Capital", "Equity"),
    ("Drawings", "Equity"),
    ("Retained Earnings", "Equity"),
    # Revenue
    ("Sales Revenue", "Revenue"),
    ("Service Revenue", "Revenue"),
    ("Interest Income", "Revenue"),
    # Expenses
    ("Cost of Goods Sold", "Expense"),
    ("Rent Expense", "Expense"),
    ("Salary Expense", "Expense"),
    ("Utilities Expense", "Expense"),
    ("Marketing Expense", "Expense"),
    ("Purchases", "Expense"),
    ("Office Supplies", "Expense"),
]


@click.command("init-accounts")
@click.option("--force", is_flag=True, help="Add missing default accounts even if some accounts exist")
@click.pass_context
def init_accounts(ctx, force: bool):
    """Initialize database with the default chart of accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    existing = {acc.name for acc in service.list_accounts()}
    if existing and not force:
        click.echo("Accounts already exist. Use --force to add missing defaults.")
        return

    click.echo("Creating default chart of accounts...")

    created = 0
    errors = 0
    for name, account_type in INITIAL_ACCOUNTS:
        if name in existing:
            continue
        try:
            service.create_account(name=name, account_type=account_type)
            created += 1
        except DomainError as e:
            click.echo(f"Warning: Could not create account '{name}': {e}", err=True)
            errors += 1

    if errors == 0:
        click.echo(f"Successfully created {created} accounts.")
    else:
        click.echo(f"Created {created} accounts with {errors} errors.")


def register_commands(cli):
    """Register init-accounts command with main CLI."""
    cli.add_command(init_accounts)
