"""Trial balance assembly."""

from decimal import Decimal
from typing import Iterable, Optional

from officeledger.domain.config import ReportingConfig
from officeledger.domain.entities import (
    ACCOUNT_TYPE_ORDER,
    AccountBalance,
    NormalBalance,
    TrialBalance,
    TrialBalanceSection,
)
from officeledger.logging_config import get_logger

logger = get_logger("domain.trial_balance")


def build_trial_balance(
    balances: Iterable[AccountBalance], config: Optional[ReportingConfig] = None
) -> TrialBalance:
    """Split account balances into debit and credit columns and total them.

    Accounts with a zero balance are left out unless the config asks for
    them. Abnormal balances stay in the totals; they are only flagged.

    Args:
        balances: Classified balances, one per account
        config: Reporting options (tolerance, zero-balance listing)

    Returns:
        TrialBalance with rows grouped by account type
    """
    config = config or ReportingConfig()
    candidates = [
        balance
        for balance in balances
        if config.include_zero_balances or balance.balance_amount > 0
    ]

    sections: list[TrialBalanceSection] = []
    rows: list[AccountBalance] = []
    for account_type in ACCOUNT_TYPE_ORDER:
        section_rows = tuple(b for b in candidates if b.account_type == account_type)
        if section_rows:
            sections.append(TrialBalanceSection(account_type=account_type, rows=section_rows))
            rows.extend(section_rows)

    debit_rows = tuple(r for r in rows if r.balance_type == NormalBalance.DEBIT)
    credit_rows = tuple(r for r in rows if r.balance_type == NormalBalance.CREDIT)
    total_debits = sum((r.balance_amount for r in debit_rows), Decimal("0"))
    total_credits = sum((r.balance_amount for r in credit_rows), Decimal("0"))
    difference = total_debits - total_credits
    is_balanced = config.within_tolerance(difference)

    if not is_balanced:
        logger.warning(
            "Trial balance does not balance: debits %s, credits %s, difference %s",
            total_debits,
            total_credits,
            difference,
        )

    return TrialBalance(
        rows=tuple(rows),
        sections=tuple(sections),
        debit_rows=debit_rows,
        credit_rows=credit_rows,
        total_debits=total_debits,
        total_credits=total_credits,
        difference=difference,
        is_balanced=is_balanced,
    )
