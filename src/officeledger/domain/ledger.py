"""Per-account general ledger.

Pure functions, like the balance engine: the ledger is rebuilt from the
transactions it is given and shares the classifier with the reports, so its
closing figures always agree with the trial balance for the same window.
"""

from datetime import date
from typing import Iterable

from officeledger.domain.balances import ZERO, classify_balance, coerce_amount
from officeledger.domain.entities import (
    Account,
    AccountLedger,
    AccountTotals,
    LedgerEntry,
    NormalBalance,
    Transaction,
)
from officeledger.domain.errors import IntegrityError, negative_amount
from officeledger.logging_config import get_logger
from officeledger.utils.date_parser import coerce_date

logger = get_logger("domain.ledger")


def _sort_key(txn: Transaction) -> tuple[bool, date]:
    # Undated rows sort last; the sort is stable so ties keep input order
    txn_date = coerce_date(txn.date)
    return (txn_date is None, txn_date or date.min)


def build_account_ledger(
    account: Account, transactions: Iterable[Transaction]
) -> AccountLedger:
    """Build the T-account for one account.

    Transactions that touch neither leg of the account are ignored. The running
    balance moves up with legs on the account's normal side and down with legs
    on the other side.

    Args:
        account: Account to build the ledger for
        transactions: Transactions to scan, already validated against the
            chart of accounts

    Returns:
        AccountLedger with entries in date order

    Raises:
        IntegrityError: If a relevant transaction has an unusable amount
    """
    relevant = [
        txn
        for txn in transactions
        if account.id in (txn.debit_account_id, txn.credit_account_id)
    ]
    relevant.sort(key=_sort_key)

    normal_balance = account.resolved_normal_balance
    running = ZERO
    total_debits = ZERO
    total_credits = ZERO
    entries: list[LedgerEntry] = []
    for txn in relevant:
        amount = coerce_amount(txn.id, txn.amount)
        if amount < 0:
            raise IntegrityError(txn.id, negative_amount(txn.id, amount))

        if txn.debit_account_id == account.id:
            side = NormalBalance.DEBIT
            total_debits += amount
        else:
            side = NormalBalance.CREDIT
            total_credits += amount
        running += amount if side == normal_balance else -amount
        entries.append(
            LedgerEntry(transaction=txn, side=side, amount=amount, running_balance=running)
        )

    logger.debug("Built ledger for %s: %d entries", account.name, len(entries))
    balance = classify_balance(
        account, AccountTotals(debit_total=total_debits, credit_total=total_credits)
    )
    return AccountLedger(account=account, entries=tuple(entries), balance=balance)
