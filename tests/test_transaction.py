"""Tests for journal commands."""

from datetime import date
from decimal import Decimal

from officeledger.cli.main import cli


def test_add_entry_with_account_names(cli_runner, temp_db, sample_accounts, transaction_service):
    """Test posting an entry using account names."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "journal",
            "add",
            "--debit",
            "Cash",
            "--credit",
            "Capital",
            "--amount",
            "1,000.00",
            "--date",
            "2026-03-02",
            "--description",
            "Owner investment",
        ],
    )

    assert result.exit_code == 0
    assert "Created transaction" in result.output
    assert "Debit: Cash" in result.output
    assert "Credit: Capital" in result.output
    assert "$1,000.00" in result.output

    txns = transaction_service.list_transactions()
    assert len(txns) == 1
    assert txns[0].amount == Decimal("1000.00")
    assert txns[0].date == date(2026, 3, 2)


def test_add_entry_with_account_ids(cli_runner, temp_db, sample_accounts):
    """Test posting an entry using account IDs."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "journal",
            "add",
            "--debit",
            str(sample_accounts["Rent Expense"].id),
            "--credit",
            str(sample_accounts["Cash"].id),
            "--amount",
            "250",
            "--date",
            "2026-03-05",
        ],
    )

    assert result.exit_code == 0
    assert "Debit: Rent Expense" in result.output


def test_add_entry_same_account_fails(cli_runner, temp_db, sample_accounts):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "journal", "add",
            "--debit", "Cash", "--credit", "Cash", "--amount", "10",
        ],
    )

    assert result.exit_code == 1
    assert "same account" in result.output


def test_add_entry_negative_amount_fails(cli_runner, temp_db, sample_accounts):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "journal", "add",
            "--debit", "Cash", "--credit", "Sales", "--amount", "(50.00)",
        ],
    )

    assert result.exit_code == 1
    assert "negative amount" in result.output


def test_add_entry_invalid_amount(cli_runner, temp_db, sample_accounts):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "journal", "add",
            "--debit", "Cash", "--credit", "Sales", "--amount", "lots",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output


def test_add_entry_unknown_account(cli_runner, temp_db, sample_accounts):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "journal", "add",
            "--debit", "Petty Cash", "--credit", "Sales", "--amount", "10",
        ],
    )

    assert result.exit_code == 1
    assert "Account 'Petty Cash' not found" in result.output


def test_add_entry_invalid_date(cli_runner, temp_db, sample_accounts):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "journal", "add",
            "--debit", "Cash", "--credit", "Sales", "--amount", "10", "--date", "someday",
        ],
    )

    assert result.exit_code == 1
    assert "Invalid date format" in result.output


def test_list_entries_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "journal", "list"])

    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_list_entries_with_filters(cli_runner, temp_db, sample_accounts, transaction_service):
    cash = sample_accounts["Cash"]
    transaction_service.create_transaction(
        date(2026, 2, 10), cash.id, sample_accounts["Capital"].id, "1000", "Investment"
    )
    transaction_service.create_transaction(
        date(2026, 3, 10), sample_accounts["Rent Expense"].id, cash.id, "300", "March rent"
    )

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "journal", "list"]
    )
    assert result.exit_code == 0
    assert "Investment" in result.output
    assert "March rent" in result.output
    assert "2 transactions" in result.output

    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "journal", "list",
            "--start-date", "2026-03-01", "--end-date", "2026-03-31",
        ],
    )
    assert result.exit_code == 0
    assert "Investment" not in result.output
    assert "March rent" in result.output
    assert "1 transaction" in result.output

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "journal", "list", "--account", "Capital"],
    )
    assert "Investment" in result.output
    assert "March rent" not in result.output


def test_list_entries_rejects_dates_with_preset_period(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "journal", "list",
            "--period", "monthly", "--start-date", "2026-03-01",
        ],
    )

    assert result.exit_code == 1
    assert "--period custom" in result.output


def test_delete_entry(cli_runner, temp_db, sample_accounts, transaction_service):
    txn_id = transaction_service.create_transaction(
        date(2026, 3, 1), sample_accounts["Cash"].id, sample_accounts["Sales"].id, "20"
    )

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "journal", "delete", str(txn_id)]
    )

    assert result.exit_code == 0
    assert f"Deleted transaction {txn_id}" in result.output
    assert transaction_service.get_transaction(txn_id) is None


def test_delete_missing_entry(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "journal", "delete", "999"]
    )

    assert result.exit_code == 1
    assert "Transaction 999 not found" in result.output
