"""Account balance aggregation and classification.

Pure functions: no database access, no clock access. The aggregator walks the
transaction list exactly once, accumulating debit and credit totals into a
single map keyed by account id; the classifier then turns each account's
totals into a normal-balance-aware ``AccountBalance``.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Collection, Iterable, Sequence

from officeledger.domain.entities import (
    Account,
    AccountBalance,
    AccountTotals,
    AccountType,
    NormalBalance,
    Transaction,
)
from officeledger.domain.errors import (
    IntegrityError,
    invalid_amount,
    negative_amount,
    same_account_on_both_legs,
    unknown_account_reference,
)
from officeledger.logging_config import get_logger
from officeledger.utils.amount_parser import parse_amount

logger = get_logger("domain.balances")

ZERO = Decimal("0")


def coerce_amount(transaction_id: Any, value: Any) -> Decimal:
    """Convert a transaction amount to a finite Decimal.

    Raises:
        IntegrityError: If the value is not numeric or not finite
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise IntegrityError(transaction_id, invalid_amount(transaction_id, value))

    try:
        if isinstance(value, str):
            amount = parse_amount(value)
        elif isinstance(value, float):
            # str() keeps 0.1 as 0.1 instead of its binary expansion
            amount = Decimal(str(value))
        else:
            amount = Decimal(value)
    except (InvalidOperation, ValueError) as e:
        raise IntegrityError(transaction_id, invalid_amount(transaction_id, value)) from e

    if not amount.is_finite():
        raise IntegrityError(transaction_id, invalid_amount(transaction_id, value))
    return amount


def validate_transaction(txn: Transaction, account_ids: Collection[Any]) -> Decimal:
    """Check a transaction against the account set and return its amount.

    Args:
        txn: Transaction to validate
        account_ids: Ids of every known account

    Returns:
        The transaction amount as a finite, non-negative Decimal

    Raises:
        IntegrityError: If an account reference is unknown, both legs hit the
            same account, or the amount is negative or not a finite number
    """
    if txn.debit_account_id not in account_ids:
        raise IntegrityError(
            txn.id, unknown_account_reference(txn.id, "debit", txn.debit_account_id)
        )
    if txn.credit_account_id not in account_ids:
        raise IntegrityError(
            txn.id, unknown_account_reference(txn.id, "credit", txn.credit_account_id)
        )
    if txn.debit_account_id == txn.credit_account_id:
        raise IntegrityError(
            txn.id, same_account_on_both_legs(txn.id, txn.debit_account_id)
        )

    amount = coerce_amount(txn.id, txn.amount)
    if amount < 0:
        raise IntegrityError(txn.id, negative_amount(txn.id, amount))
    return amount


def aggregate_account_totals(
    accounts: Sequence[Account], transactions: Iterable[Transaction]
) -> dict[Any, AccountTotals]:
    """Sum debit and credit legs per account in one pass over transactions.

    Every account gets an entry, zero when no transaction touches it.

    Raises:
        IntegrityError: On the first transaction that fails validation
    """
    debits: dict[Any, Decimal] = {account.id: ZERO for account in accounts}
    credits: dict[Any, Decimal] = dict(debits)

    count = 0
    for txn in transactions:
        amount = validate_transaction(txn, debits)
        debits[txn.debit_account_id] += amount
        credits[txn.credit_account_id] += amount
        count += 1

    logger.debug(
        "Aggregated %d transactions across %d accounts", count, len(debits)
    )
    return {
        account_id: AccountTotals(
            debit_total=debits[account_id], credit_total=credits[account_id]
        )
        for account_id in debits
    }


def classify_balance(account: Account, totals: AccountTotals) -> AccountBalance:
    """Classify an account's totals against its normal balance side.

    The abnormal check keeps an explicit Asset/Expense exclusion on the
    credit-normal branch; accounts of those types with an explicit credit
    normal balance are never flagged for carrying a debit balance.
    """
    raw_balance = totals.debit_total - totals.credit_total
    balance_type = NormalBalance.DEBIT if raw_balance >= 0 else NormalBalance.CREDIT
    normal_balance = account.resolved_normal_balance

    if normal_balance == NormalBalance.DEBIT:
        signed_balance = raw_balance
    else:
        signed_balance = -raw_balance

    is_abnormal = (normal_balance == NormalBalance.DEBIT and raw_balance < 0) or (
        normal_balance == NormalBalance.CREDIT
        and raw_balance > 0
        and account.type not in (AccountType.ASSET, AccountType.EXPENSE)
    )

    return AccountBalance(
        account=account,
        debit_total=totals.debit_total,
        credit_total=totals.credit_total,
        raw_balance=raw_balance,
        balance_amount=abs(raw_balance),
        balance_type=balance_type,
        normal_balance=normal_balance,
        signed_balance=signed_balance,
        is_abnormal=is_abnormal,
    )


def compute_account_balances(
    accounts: Sequence[Account], transactions: Iterable[Transaction]
) -> list[AccountBalance]:
    """Aggregate then classify, returning one balance per account in input order."""
    totals = aggregate_account_totals(accounts, transactions)
    return [classify_balance(account, totals[account.id]) for account in accounts]
