"""Shared pytest fixtures for officeledger tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal

import pytest

from officeledger.database.factories import create_sqlite_database
from officeledger.domain.account import AccountService
from officeledger.domain.entities import Account, Transaction
from officeledger.domain.transaction import TransactionService
from officeledger.logging_config import reset_logging


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def sample_accounts(account_service):
    """Create a small chart of accounts and return them by name."""
    chart = [
        ("Cash", "Asset"),
        ("Accounts Payable", "Liability"),
        ("Capital", "Equity"),
        ("Drawings", "Equity"),
        ("Sales", "Revenue"),
        ("Cost of Goods Sold", "Expense"),
        ("Rent Expense", "Expense"),
    ]
    accounts = {}
    for name, account_type in chart:
        account_id = account_service.create_account(name=name, account_type=account_type)
        accounts[name] = account_service.get_account(account_id)
    return accounts


@pytest.fixture
def chart():
    """In-memory accounts for pure engine tests, keyed by name."""
    accounts = [
        Account(id=1, name="Cash", type="Asset"),
        Account(id=2, name="Accounts Payable", type="Liability"),
        Account(id=3, name="Capital", type="Equity"),
        Account(id=4, name="Drawings", type="Equity"),
        Account(id=5, name="Sales", type="Revenue"),
        Account(id=6, name="Cost of Goods Sold", type="Expense"),
        Account(id=7, name="Rent Expense", type="Expense"),
    ]
    return {account.name: account for account in accounts}


@pytest.fixture
def make_txn():
    """Build in-memory transactions with sequential ids."""
    counter = {"next": 1}

    def _make(debit, credit, amount, txn_date=date(2026, 3, 10), description=None):
        txn = Transaction(
            id=counter["next"],
            date=txn_date,
            description=description,
            debit_account_id=debit.id if isinstance(debit, Account) else debit,
            credit_account_id=credit.id if isinstance(credit, Account) else credit,
            amount=Decimal(amount) if isinstance(amount, (int, str)) else amount,
        )
        counter["next"] += 1
        return txn

    return _make


@pytest.fixture(autouse=True)
def clean_logging():
    """Leave the officeledger logger hierarchy untouched between tests."""
    yield
    reset_logging()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
