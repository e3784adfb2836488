"""Domain model entities for officeledger.

These are pure data classes representing bookkeeping concepts, independent of
database schema. Accounts and transactions are inputs to the calculation
engine; everything else here is derived by it and never persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class AccountType(str, Enum):
    """Closed set of account types in the chart of accounts."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


class NormalBalance(str, Enum):
    """Ledger side on which an account is expected to carry its balance."""

    DEBIT = "Debit"
    CREDIT = "Credit"


class AccountRole(str, Enum):
    """Structural role of an account beyond its type."""

    DRAWINGS = "drawings"
    COGS = "cogs"


# Statement order used when listing accounts by type
ACCOUNT_TYPE_ORDER = (
    AccountType.ASSET,
    AccountType.LIABILITY,
    AccountType.EQUITY,
    AccountType.REVENUE,
    AccountType.EXPENSE,
)

DEBIT_NORMAL_TYPES = frozenset({AccountType.ASSET, AccountType.EXPENSE})

DRAWINGS_ACCOUNT_NAME = "Drawings"
COGS_ACCOUNT_NAME = "Cost of Goods Sold"

ROLE_NAMES = {
    DRAWINGS_ACCOUNT_NAME: AccountRole.DRAWINGS,
    COGS_ACCOUNT_NAME: AccountRole.COGS,
}


def infer_role(name: str) -> Optional[AccountRole]:
    """Return the structural role implied by an account name, if any."""
    return ROLE_NAMES.get(name)


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry.

    ``role`` is resolved once when the entity is created: if none is given,
    the conventional names "Drawings" and "Cost of Goods Sold" map to their
    roles. Entities loaded from storage pass ``infer_role_from_name=False``
    so the stored role, or its absence, survives a rename.
    """

    id: int
    name: str
    type: AccountType
    normal_balance: Optional[NormalBalance] = None
    role: Optional[AccountRole] = None
    created_at: Optional[datetime] = None
    infer_role_from_name: bool = field(default=True, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", AccountType(self.type))
        if self.normal_balance is not None:
            object.__setattr__(self, "normal_balance", NormalBalance(self.normal_balance))
        if self.role is not None:
            object.__setattr__(self, "role", AccountRole(self.role))
        elif self.infer_role_from_name:
            object.__setattr__(self, "role", infer_role(self.name))

    @property
    def is_drawings(self) -> bool:
        return self.role == AccountRole.DRAWINGS

    @property
    def is_cogs(self) -> bool:
        return self.role == AccountRole.COGS

    @property
    def resolved_normal_balance(self) -> NormalBalance:
        """Expected balance side after role, explicit field and type rules."""
        if self.is_drawings:
            return NormalBalance.DEBIT
        if self.normal_balance is not None:
            return self.normal_balance
        if self.type in DEBIT_NORMAL_TYPES:
            return NormalBalance.DEBIT
        return NormalBalance.CREDIT


@dataclass(frozen=True)
class Transaction:
    """Journal entry with exactly one debit leg and one credit leg.

    ``date`` and ``amount`` are typed for the common case but may arrive in
    looser forms from external collaborators; the engine validates them
    rather than the entity.
    """

    id: int
    date: date
    description: Optional[str]
    debit_account_id: int
    credit_account_id: int
    amount: Decimal
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AccountTotals:
    """Debit and credit totals for one account over a transaction set."""

    debit_total: Decimal = Decimal("0")
    credit_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class AccountBalance:
    """Classified balance of one account, joined with the account itself."""

    account: Account
    debit_total: Decimal
    credit_total: Decimal
    raw_balance: Decimal
    balance_amount: Decimal
    balance_type: NormalBalance
    normal_balance: NormalBalance
    signed_balance: Decimal
    is_abnormal: bool

    @property
    def account_id(self) -> int:
        return self.account.id

    @property
    def name(self) -> str:
        return self.account.name

    @property
    def account_type(self) -> AccountType:
        return self.account.type


@dataclass(frozen=True)
class TrialBalanceSection:
    """Trial balance rows for a single account type."""

    account_type: AccountType
    rows: tuple[AccountBalance, ...]


@dataclass(frozen=True)
class TrialBalance:
    """Debit/credit listing of every account with a balance."""

    rows: tuple[AccountBalance, ...]
    sections: tuple[TrialBalanceSection, ...]
    debit_rows: tuple[AccountBalance, ...]
    credit_rows: tuple[AccountBalance, ...]
    total_debits: Decimal
    total_credits: Decimal
    difference: Decimal
    is_balanced: bool

    @property
    def abnormal_rows(self) -> tuple[AccountBalance, ...]:
        return tuple(row for row in self.rows if row.is_abnormal)


@dataclass(frozen=True)
class IncomeStatement:
    """Revenue, cost of goods sold, operating expenses and net profit."""

    revenue_lines: tuple[AccountBalance, ...]
    cogs_lines: tuple[AccountBalance, ...]
    operating_expense_lines: tuple[AccountBalance, ...]
    total_revenue: Decimal
    cogs_total: Decimal
    gross_profit: Decimal
    operating_expenses: Decimal
    total_expenses: Decimal
    net_profit: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Assets, liabilities and equity with net profit and drawings folded in."""

    asset_lines: tuple[AccountBalance, ...]
    liability_lines: tuple[AccountBalance, ...]
    capital_lines: tuple[AccountBalance, ...]
    drawings_lines: tuple[AccountBalance, ...]
    total_assets: Decimal
    total_liabilities: Decimal
    total_capital: Decimal
    drawings_balance: Decimal
    net_profit: Decimal
    total_equity: Decimal
    total_liabilities_and_equity: Decimal
    difference: Decimal
    accounting_equation_balanced: bool


@dataclass(frozen=True)
class FinancialStatements:
    """Income statement and balance sheet built from one balance set."""

    income_statement: IncomeStatement
    balance_sheet: BalanceSheet


@dataclass(frozen=True)
class DateRange:
    """Inclusive reporting window. Both ends are None for an unbounded range."""

    start: Optional[date]
    end: Optional[date]
    label: str

    def contains(self, value: date) -> bool:
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


@dataclass(frozen=True)
class IntegrityIssue:
    """A transaction rejected from a report because of bad input data."""

    transaction_id: Any
    message: str


@dataclass(frozen=True)
class ImbalanceWarning:
    """Non-fatal signal that totals did not reconcile."""

    check: str
    difference: Decimal
    message: str


@dataclass(frozen=True)
class EmptyPeriodResult:
    """Non-fatal signal that the reporting window holds no transactions."""

    message: str


@dataclass(frozen=True)
class ReportDiagnostics:
    """Problems found while building a report bundle."""

    integrity_issues: tuple[IntegrityIssue, ...] = ()
    warnings: tuple[Any, ...] = ()
    skipped_undated: tuple[Any, ...] = ()

    @property
    def has_integrity_issues(self) -> bool:
        return bool(self.integrity_issues)


@dataclass(frozen=True)
class ReportSummary:
    """Headline totals across the trial balance and both statements."""

    total_assets: Decimal
    total_liabilities: Decimal
    total_equity: Decimal
    total_capital: Decimal
    drawings_balance: Decimal
    total_revenue: Decimal
    cogs_total: Decimal
    gross_profit: Decimal
    operating_expenses: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    total_debits: Decimal
    total_credits: Decimal
    is_balanced: bool
    accounting_equation_balanced: bool
    equation_difference: Decimal


class ReportStatus(str, Enum):
    """Overall state of a report bundle for display badges."""

    EMPTY = "empty"
    INTEGRITY_ERROR = "integrity-error"
    BALANCED = "balanced"
    UNBALANCED = "unbalanced"


@dataclass(frozen=True)
class ReportBundle:
    """Everything derived for one reporting period."""

    period: str
    date_range: DateRange
    transaction_count: int
    transactions: tuple[Transaction, ...]
    account_balances: tuple[AccountBalance, ...]
    trial_balance: TrialBalance
    income_statement: IncomeStatement
    balance_sheet: BalanceSheet
    summary: ReportSummary
    diagnostics: ReportDiagnostics = field(default_factory=ReportDiagnostics)

    def accounts_of_type(self, account_type: AccountType) -> tuple[AccountBalance, ...]:
        return tuple(
            balance
            for balance in self.account_balances
            if balance.account_type == account_type
        )

    @property
    def asset_accounts(self) -> tuple[AccountBalance, ...]:
        return self.accounts_of_type(AccountType.ASSET)

    @property
    def liability_accounts(self) -> tuple[AccountBalance, ...]:
        return self.accounts_of_type(AccountType.LIABILITY)

    @property
    def equity_accounts(self) -> tuple[AccountBalance, ...]:
        return self.accounts_of_type(AccountType.EQUITY)

    @property
    def revenue_accounts(self) -> tuple[AccountBalance, ...]:
        return self.accounts_of_type(AccountType.REVENUE)

    @property
    def expense_accounts(self) -> tuple[AccountBalance, ...]:
        return self.accounts_of_type(AccountType.EXPENSE)

    @property
    def is_empty(self) -> bool:
        return self.transaction_count == 0

    @property
    def status(self) -> ReportStatus:
        if self.diagnostics.has_integrity_issues:
            return ReportStatus.INTEGRITY_ERROR
        if self.is_empty:
            return ReportStatus.EMPTY
        if self.summary.is_balanced and self.summary.accounting_equation_balanced:
            return ReportStatus.BALANCED
        return ReportStatus.UNBALANCED


@dataclass(frozen=True)
class LedgerEntry:
    """One leg of a transaction as seen from a single account."""

    transaction: Transaction
    side: NormalBalance
    amount: Decimal
    running_balance: Decimal

    @property
    def is_debit(self) -> bool:
        return self.side == NormalBalance.DEBIT

    @property
    def debit_amount(self) -> Optional[Decimal]:
        return self.amount if self.is_debit else None

    @property
    def credit_amount(self) -> Optional[Decimal]:
        return None if self.is_debit else self.amount


@dataclass(frozen=True)
class AccountLedger:
    """General ledger (T-account) for one account.

    ``entries`` are in date order. Each running balance is signed against the
    account's normal balance, so the last one always equals
    ``balance.signed_balance``.
    """

    account: Account
    entries: tuple[LedgerEntry, ...]
    balance: AccountBalance

    @property
    def total_debits(self) -> Decimal:
        return self.balance.debit_total

    @property
    def total_credits(self) -> Decimal:
        return self.balance.credit_total

    @property
    def ending_balance(self) -> Decimal:
        return self.balance.balance_amount

    @property
    def balance_side(self) -> NormalBalance:
        return self.balance.balance_type

    @property
    def is_empty(self) -> bool:
        return not self.entries
