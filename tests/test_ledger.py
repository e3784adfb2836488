"""Tests for the per-account general ledger."""

from datetime import date
from decimal import Decimal

import pytest

from officeledger.domain.balances import compute_account_balances
from officeledger.domain.entities import NormalBalance, Transaction
from officeledger.domain.errors import IntegrityError
from officeledger.domain.ledger import build_account_ledger
from officeledger.domain.periods import resolve_period
from officeledger.domain.report import ReportService


def test_debit_normal_running_balance(chart, make_txn):
    cash = chart["Cash"]
    txns = [
        make_txn(cash, chart["Capital"], 1000, date(2026, 3, 1)),
        make_txn(chart["Rent Expense"], cash, 300, date(2026, 3, 5)),
        make_txn(cash, chart["Sales"], 50, date(2026, 3, 9)),
    ]

    ledger = build_account_ledger(cash, txns)

    assert [entry.side for entry in ledger.entries] == [
        NormalBalance.DEBIT,
        NormalBalance.CREDIT,
        NormalBalance.DEBIT,
    ]
    assert [entry.running_balance for entry in ledger.entries] == [
        Decimal("1000"),
        Decimal("700"),
        Decimal("750"),
    ]
    assert ledger.total_debits == Decimal("1050")
    assert ledger.total_credits == Decimal("300")
    assert ledger.ending_balance == Decimal("750")
    assert ledger.balance_side == NormalBalance.DEBIT


def test_credit_normal_running_balance(chart, make_txn):
    """Credits raise the balance of a credit-normal account."""
    sales = chart["Sales"]
    txns = [
        make_txn(chart["Cash"], sales, 400),
        make_txn(sales, chart["Cash"], 150),
    ]

    ledger = build_account_ledger(sales, txns)

    assert [entry.running_balance for entry in ledger.entries] == [
        Decimal("400"),
        Decimal("250"),
    ]
    assert ledger.entries[0].credit_amount == Decimal("400")
    assert ledger.entries[0].debit_amount is None
    assert ledger.balance_side == NormalBalance.CREDIT


def test_drawings_runs_as_debit_normal(chart, make_txn):
    drawings = chart["Drawings"]

    ledger = build_account_ledger(drawings, [make_txn(drawings, chart["Cash"], 80)])

    assert ledger.entries[0].running_balance == Decimal("80")
    assert ledger.balance.signed_balance == Decimal("80")
    assert not ledger.balance.is_abnormal


def test_entries_sorted_by_date_and_other_accounts_ignored(chart, make_txn):
    cash = chart["Cash"]
    later = make_txn(cash, chart["Sales"], 20, date(2026, 3, 20))
    earlier = make_txn(chart["Rent Expense"], cash, 5, date(2026, 3, 2))
    unrelated = make_txn(chart["Rent Expense"], chart["Accounts Payable"], 99)

    ledger = build_account_ledger(cash, [later, unrelated, earlier])

    assert [entry.transaction for entry in ledger.entries] == [earlier, later]


def test_same_day_entries_keep_input_order(chart, make_txn):
    cash = chart["Cash"]
    first = make_txn(cash, chart["Sales"], 10)
    second = make_txn(chart["Rent Expense"], cash, 10)

    ledger = build_account_ledger(cash, [first, second])

    assert [entry.transaction for entry in ledger.entries] == [first, second]


def test_ledger_agrees_with_classifier(chart, make_txn):
    """The closing figures match the account's row in the balance engine."""
    accounts = list(chart.values())
    txns = [
        make_txn(chart["Cash"], chart["Capital"], "5000"),
        make_txn(chart["Cash"], chart["Sales"], "1200.50"),
        make_txn(chart["Cost of Goods Sold"], chart["Cash"], "400.25"),
        make_txn(chart["Drawings"], chart["Cash"], "250"),
        make_txn(chart["Sales"], chart["Cash"], "0"),
    ]
    balances = {b.account_id: b for b in compute_account_balances(accounts, txns)}

    for account in accounts:
        ledger = build_account_ledger(account, txns)
        expected = balances[account.id]
        assert ledger.balance == expected
        if ledger.entries:
            assert ledger.entries[-1].running_balance == expected.signed_balance


def test_empty_ledger(chart):
    ledger = build_account_ledger(chart["Cash"], [])

    assert ledger.is_empty
    assert ledger.ending_balance == Decimal("0")
    assert ledger.total_debits == ledger.total_credits == Decimal("0")


def test_negative_amount_rejected(chart):
    txn = Transaction(
        id=7,
        date=date(2026, 3, 1),
        description=None,
        debit_account_id=chart["Cash"].id,
        credit_account_id=chart["Sales"].id,
        amount=Decimal("-5"),
    )

    with pytest.raises(IntegrityError) as exc_info:
        build_account_ledger(chart["Cash"], [txn])

    assert exc_info.value.transaction_id == 7


def test_report_service_ledger_window(temp_db, sample_accounts, transaction_service):
    a = sample_accounts
    transaction_service.create_transaction(date(2026, 2, 27), a["Cash"].id, a["Capital"].id, "900")
    transaction_service.create_transaction(date(2026, 3, 3), a["Cash"].id, a["Sales"].id, "120")
    transaction_service.create_transaction(date(2026, 3, 8), a["Rent Expense"].id, a["Cash"].id, "45")
    march = resolve_period("custom", start_date="2026-03-01", end_date="2026-03-31")

    ledger = ReportService(temp_db).generate_ledger(a["Cash"], march)

    assert len(ledger.entries) == 2
    assert ledger.total_debits == Decimal("120")
    assert ledger.total_credits == Decimal("45")
    assert ledger.ending_balance == Decimal("75")
