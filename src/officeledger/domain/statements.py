"""Financial statement composition.

Pure transformation functions from classified account balances to the
income statement and balance sheet. Net profit is computed once, by the
income statement, and the same value is carried into balance sheet equity:
the two statements are projections of one transaction set.

All monetary values are Decimal. All inputs and outputs are frozen.
"""

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from officeledger.domain.config import ReportingConfig
from officeledger.domain.entities import (
    AccountBalance,
    AccountType,
    BalanceSheet,
    FinancialStatements,
    IncomeStatement,
)
from officeledger.logging_config import get_logger

logger = get_logger("domain.statements")


def sum_signed_balances(lines: Iterable[AccountBalance]) -> Decimal:
    """Sum the signed balances of a set of lines."""
    return sum((line.signed_balance for line in lines), Decimal("0"))


def _lines_of_type(
    balances: Sequence[AccountBalance], account_type: AccountType
) -> tuple[AccountBalance, ...]:
    return tuple(b for b in balances if b.account_type == account_type)


def build_income_statement(balances: Sequence[AccountBalance]) -> IncomeStatement:
    """Build the income statement.

    Cost of goods sold is the expense account carrying the COGS role and is
    kept apart from operating expenses so gross profit can be shown.
    """
    revenue_lines = _lines_of_type(balances, AccountType.REVENUE)
    expense_lines = _lines_of_type(balances, AccountType.EXPENSE)
    cogs_lines = tuple(b for b in expense_lines if b.account.is_cogs)
    operating_expense_lines = tuple(b for b in expense_lines if not b.account.is_cogs)

    total_revenue = sum_signed_balances(revenue_lines)
    cogs_total = sum_signed_balances(cogs_lines)
    gross_profit = total_revenue - cogs_total
    operating_expenses = sum_signed_balances(operating_expense_lines)

    return IncomeStatement(
        revenue_lines=revenue_lines,
        cogs_lines=cogs_lines,
        operating_expense_lines=operating_expense_lines,
        total_revenue=total_revenue,
        cogs_total=cogs_total,
        gross_profit=gross_profit,
        operating_expenses=operating_expenses,
        total_expenses=cogs_total + operating_expenses,
        net_profit=gross_profit - operating_expenses,
    )


def build_balance_sheet(
    balances: Sequence[AccountBalance],
    net_profit: Decimal,
    config: Optional[ReportingConfig] = None,
) -> BalanceSheet:
    """Build the balance sheet and check Assets = Liabilities + Equity.

    Equity is capital plus net profit less drawings. Drawings accounts are
    found by role regardless of their declared type. When the equation does
    not hold the difference is reported as-is; no balancing line is added.

    Args:
        balances: Classified balances, one per account
        net_profit: Net profit from the income statement of the same balances
        config: Reporting options (tolerance)
    """
    config = config or ReportingConfig()

    asset_lines = _lines_of_type(balances, AccountType.ASSET)
    liability_lines = _lines_of_type(balances, AccountType.LIABILITY)
    capital_lines = tuple(
        b for b in _lines_of_type(balances, AccountType.EQUITY) if not b.account.is_drawings
    )
    drawings_lines = tuple(b for b in balances if b.account.is_drawings)

    total_assets = sum_signed_balances(asset_lines)
    total_liabilities = sum_signed_balances(liability_lines)
    total_capital = sum_signed_balances(capital_lines)
    drawings_balance = sum_signed_balances(drawings_lines)
    total_equity = total_capital + net_profit - drawings_balance
    total_liabilities_and_equity = total_liabilities + total_equity
    difference = total_assets - total_liabilities_and_equity
    balanced = config.within_tolerance(difference)

    if not balanced:
        logger.warning(
            "Accounting equation does not hold: assets %s, liabilities + equity %s",
            total_assets,
            total_liabilities_and_equity,
        )

    return BalanceSheet(
        asset_lines=asset_lines,
        liability_lines=liability_lines,
        capital_lines=capital_lines,
        drawings_lines=drawings_lines,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        total_capital=total_capital,
        drawings_balance=drawings_balance,
        net_profit=net_profit,
        total_equity=total_equity,
        total_liabilities_and_equity=total_liabilities_and_equity,
        difference=difference,
        accounting_equation_balanced=balanced,
    )


def compose_statements(
    balances: Sequence[AccountBalance], config: Optional[ReportingConfig] = None
) -> FinancialStatements:
    """Build both statements, threading one net profit figure through them."""
    income_statement = build_income_statement(balances)
    balance_sheet = build_balance_sheet(
        balances, income_statement.net_profit, config=config
    )
    return FinancialStatements(
        income_statement=income_statement, balance_sheet=balance_sheet
    )
