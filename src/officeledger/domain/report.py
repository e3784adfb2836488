"""Period report generation.

Each report is a from-scratch recomputation over the transactions inside its
window: nothing is carried over from outside the window and no running
balances are kept between calls, so the same inputs always give the same
bundle.
"""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence

from officeledger.domain.balances import compute_account_balances, validate_transaction
from officeledger.domain.config import ReportingConfig
from officeledger.domain.entities import (
    Account,
    AccountLedger,
    DateRange,
    EmptyPeriodResult,
    FinancialStatements,
    ImbalanceWarning,
    IntegrityIssue,
    ReportBundle,
    ReportDiagnostics,
    ReportSummary,
    Transaction,
    TrialBalance,
)
from officeledger.domain.errors import IntegrityError
from officeledger.domain.ledger import build_account_ledger
from officeledger.domain.periods import ReportPeriod, parse_period, resolve_period
from officeledger.domain.statements import compose_statements
from officeledger.domain.trial_balance import build_trial_balance
from officeledger.logging_config import get_logger
from officeledger.utils.date_parser import coerce_date

if TYPE_CHECKING:
    from officeledger.database.base import Database

logger = get_logger("domain.report")


def filter_transactions_by_date_range(
    transactions: Iterable[Transaction], date_range: DateRange
) -> tuple[list[Transaction], list[Any]]:
    """Keep transactions dated inside the range, both ends inclusive.

    Returns:
        Tuple of (included transactions, ids of transactions whose date
        could not be parsed)
    """
    included: list[Transaction] = []
    skipped: list[Any] = []
    for txn in transactions:
        txn_date = coerce_date(txn.date)
        if txn_date is None:
            skipped.append(txn.id)
            continue
        if date_range.contains(txn_date):
            included.append(txn)
    return included, skipped


def partition_transactions(
    accounts: Sequence[Account],
    transactions: Iterable[Transaction],
    strict: bool = False,
) -> tuple[list[Transaction], list[IntegrityIssue]]:
    """Split transactions into valid ones and integrity issues.

    Raises:
        IntegrityError: On the first invalid transaction when strict is set
    """
    account_ids = {account.id for account in accounts}
    valid: list[Transaction] = []
    issues: list[IntegrityIssue] = []
    for txn in transactions:
        try:
            validate_transaction(txn, account_ids)
        except IntegrityError as e:
            if strict:
                raise
            logger.warning("Excluding transaction from report: %s", e)
            issues.append(IntegrityIssue(transaction_id=e.transaction_id, message=str(e)))
            continue
        valid.append(txn)
    return valid, issues


def build_summary(
    trial_balance: TrialBalance, statements: FinancialStatements
) -> ReportSummary:
    """Collect headline totals from the trial balance and statements."""
    income = statements.income_statement
    sheet = statements.balance_sheet
    return ReportSummary(
        total_assets=sheet.total_assets,
        total_liabilities=sheet.total_liabilities,
        total_equity=sheet.total_equity,
        total_capital=sheet.total_capital,
        drawings_balance=sheet.drawings_balance,
        total_revenue=income.total_revenue,
        cogs_total=income.cogs_total,
        gross_profit=income.gross_profit,
        operating_expenses=income.operating_expenses,
        total_expenses=income.total_expenses,
        net_profit=income.net_profit,
        total_debits=trial_balance.total_debits,
        total_credits=trial_balance.total_credits,
        is_balanced=trial_balance.is_balanced,
        accounting_equation_balanced=sheet.accounting_equation_balanced,
        equation_difference=sheet.difference,
    )


def _collect_warnings(
    transaction_count: int, trial_balance: TrialBalance, statements: FinancialStatements
) -> list[Any]:
    warnings: list[Any] = []
    if transaction_count == 0:
        warnings.append(EmptyPeriodResult(message="No transactions in the selected period"))
    if not trial_balance.is_balanced:
        warnings.append(
            ImbalanceWarning(
                check="trial_balance",
                difference=trial_balance.difference,
                message="Total debits do not equal total credits",
            )
        )
    if not statements.balance_sheet.accounting_equation_balanced:
        warnings.append(
            ImbalanceWarning(
                check="accounting_equation",
                difference=statements.balance_sheet.difference,
                message="Assets do not equal liabilities plus equity",
            )
        )
    return warnings


def build_report_bundle(
    period: "str | ReportPeriod",
    date_range: DateRange,
    accounts: Sequence[Account],
    transactions: Iterable[Transaction],
    config: Optional[ReportingConfig] = None,
    strict: bool = False,
) -> ReportBundle:
    """Run the full pipeline over the transactions inside a resolved window."""
    config = config or ReportingConfig()
    accounts = list(accounts)

    in_window, skipped = filter_transactions_by_date_range(transactions, date_range)
    if skipped:
        logger.warning("Skipped %d transactions with unparsable dates", len(skipped))
    valid, issues = partition_transactions(accounts, in_window, strict=strict)

    balances = compute_account_balances(accounts, valid)
    trial_balance = build_trial_balance(balances, config)
    statements = compose_statements(balances, config)

    diagnostics = ReportDiagnostics(
        integrity_issues=tuple(issues),
        warnings=tuple(_collect_warnings(len(valid), trial_balance, statements)),
        skipped_undated=tuple(skipped),
    )
    logger.debug(
        "Built report for %s (%s): %d transactions, %d rejected",
        parse_period(period).value,
        date_range.label,
        len(valid),
        len(issues),
    )

    return ReportBundle(
        period=parse_period(period).value,
        date_range=date_range,
        transaction_count=len(valid),
        transactions=tuple(valid),
        account_balances=tuple(b for b in balances if b.balance_amount > 0),
        trial_balance=trial_balance,
        income_statement=statements.income_statement,
        balance_sheet=statements.balance_sheet,
        summary=build_summary(trial_balance, statements),
        diagnostics=diagnostics,
    )


def generate_report(
    period: "str | ReportPeriod",
    accounts: Sequence[Account],
    transactions: Iterable[Transaction],
    *,
    today: Optional[date] = None,
    start_date: "date | str | None" = None,
    end_date: "date | str | None" = None,
    config: Optional[ReportingConfig] = None,
    strict: bool = False,
) -> ReportBundle:
    """Resolve a period and build its report bundle.

    Args:
        period: Period specifier (see ReportPeriod)
        accounts: Full chart of accounts
        transactions: Transactions to report on; filtered to the period here
        today: Reference day for relative periods (defaults to date.today())
        start_date: Start of a custom range
        end_date: End of a custom range
        config: Reporting options
        strict: Raise on the first invalid transaction instead of reporting it

    Returns:
        ReportBundle for the period

    Raises:
        ValidationError: If the period cannot be resolved
        IntegrityError: If strict is set and a transaction is invalid
    """
    date_range = resolve_period(period, today=today, start_date=start_date, end_date=end_date)
    return build_report_bundle(
        period, date_range, accounts, transactions, config=config, strict=strict
    )


class ReportService:
    """Service for generating period reports from stored data."""

    def __init__(self, db: "Database", config: Optional[ReportingConfig] = None):
        """Initialize report service.

        Args:
            db: Database instance
            config: Reporting options
        """
        self.db = db
        self.config = config or ReportingConfig()

    def generate_report(
        self,
        period: "str | ReportPeriod",
        start_date: "date | str | None" = None,
        end_date: "date | str | None" = None,
        today: Optional[date] = None,
        strict: bool = False,
    ) -> ReportBundle:
        """Generate a report bundle for a period."""
        date_range = resolve_period(
            period, today=today, start_date=start_date, end_date=end_date
        )
        return self.generate_for_range(period, date_range, strict=strict)

    def generate_for_range(
        self,
        period: "str | ReportPeriod",
        date_range: DateRange,
        strict: bool = False,
    ) -> ReportBundle:
        """Generate a report bundle for an already resolved window.

        Only transactions inside the window are loaded from the database.
        """
        accounts = self.db.list_accounts()
        transactions = self.db.list_transactions(
            start_date=date_range.start, end_date=date_range.end
        )
        return build_report_bundle(
            period, date_range, accounts, transactions, config=self.config, strict=strict
        )

    def generate_ledger(
        self, account: Account, date_range: DateRange, strict: bool = False
    ) -> AccountLedger:
        """Build the general ledger of one account over a resolved window.

        Invalid transactions are dropped, as in the reports, unless strict is
        set.

        Raises:
            IntegrityError: If strict is set and a transaction is invalid
        """
        accounts = self.db.list_accounts()
        transactions = self.db.list_transactions(
            start_date=date_range.start, end_date=date_range.end, account_id=account.id
        )
        in_window, _ = filter_transactions_by_date_range(transactions, date_range)
        valid, _ = partition_transactions(accounts, in_window, strict=strict)
        return build_account_ledger(account, valid)

    def get_totals(self, bundle: ReportBundle) -> dict[str, Decimal]:
        """Flatten the summary totals for display or export."""
        summary = bundle.summary
        return {
            "total_revenue": summary.total_revenue,
            "total_expenses": summary.total_expenses,
            "net_profit": summary.net_profit,
            "total_assets": summary.total_assets,
            "total_liabilities": summary.total_liabilities,
            "total_equity": summary.total_equity,
            "total_debits": summary.total_debits,
            "total_credits": summary.total_credits,
        }
