"""Main CLI entry point."""

import logging
import os

import click
from officeledger.database.factories import create_sqlite_database
from officeledger.logging_config import LOG_LEVEL_ENV_VAR, configure_logging

# Import and register all commands at module level
from officeledger.cli.commands import (
    account,
    init_accounts,
    journal,
    report,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides OFFICELEDGER_DB_PATH environment variable)",
    envvar="OFFICELEDGER_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log engine activity to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Office Ledger - double-entry bookkeeping and financial reports.

    Keep a chart of accounts, post journal entries, and produce the trial
    balance, income statement and balance sheet for any period.
    """
    ctx.ensure_object(dict)
    if verbose:
        configure_logging(level=logging.DEBUG)
    elif os.environ.get(LOG_LEVEL_ENV_VAR):
        configure_logging()

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and "db" not in ctx.obj:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
init_accounts.register_commands(cli)
journal.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
