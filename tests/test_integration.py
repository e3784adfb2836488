"""Integration tests for end-to-end workflows."""

from officeledger.cli.main import cli


def test_full_workflow(cli_runner, temp_db):
    """Test complete workflow: chart of accounts → journal → reports."""
    # Step 1: Initialize the default chart of accounts
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "init-accounts"])
    assert result.exit_code == 0

    # Step 2: Post a month of entries
    entries = [
        ("2026-03-01", "Bank Account", "Owner's Capital", "20000"),
        ("2026-03-02", "Inventory", "Accounts Payable", "3000"),
        ("2026-03-04", "Cash on Hand", "Sales Revenue", "2,500.00"),
        ("2026-03-04", "Cost of Goods Sold", "Inventory", "1200"),
        ("2026-03-15", "Rent Expense", "Bank Account", "1500"),
        ("2026-03-20", "Accounts Payable", "Bank Account", "1000"),
        ("2026-03-28", "Drawings", "Cash on Hand", "400"),
    ]
    for entry_date, debit, credit, amount in entries:
        result = cli_runner.invoke(
            cli,
            [
                "--db-path",
                temp_db.database_path,
                "journal",
                "add",
                "--date",
                entry_date,
                "--debit",
                debit,
                "--credit",
                credit,
                "--amount",
                amount,
            ],
        )
        assert result.exit_code == 0, result.output

    period = ["--start-date", "2026-03-01", "--end-date", "2026-03-31"]

    # Step 3: Trial balance
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "report", "trial-balance", *period]
    )
    assert result.exit_code == 0
    assert "Status: BALANCED" in result.output

    # Step 4: Income statement (2500 - 1200 - 1500)
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "report", "income-statement", *period]
    )
    assert result.exit_code == 0
    assert "NET LOSS" in result.output
    assert "($200.00)" in result.output

    # Step 5: Balance sheet (20000 - 200 - 400 in equity, 2000 payable)
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "report", "balance-sheet", *period]
    )
    assert result.exit_code == 0
    assert "$19,400.00" in result.output
    assert "$21,400.00" in result.output
    assert "Accounting equation: BALANCED" in result.output

    # Step 6: Summary
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "report", "summary", *period]
    )
    assert result.exit_code == 0
    assert "Transactions: 7" in result.output
    assert "Status: BALANCED" in result.output
