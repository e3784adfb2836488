"""Domain layer for officeledger application.

Only the pure calculation engine is re-exported here; the database-backed
services live in their own modules.
"""

from officeledger.domain.balances import (
    aggregate_account_totals,
    classify_balance,
    compute_account_balances,
)
from officeledger.domain.config import ReportingConfig
from officeledger.domain.ledger import build_account_ledger
from officeledger.domain.periods import ReportPeriod, resolve_period
from officeledger.domain.report import generate_report
from officeledger.domain.statements import (
    build_balance_sheet,
    build_income_statement,
    compose_statements,
)
from officeledger.domain.trial_balance import build_trial_balance

__all__ = [
    "aggregate_account_totals",
    "classify_balance",
    "compute_account_balances",
    "build_trial_balance",
    "build_income_statement",
    "build_balance_sheet",
    "compose_statements",
    "build_account_ledger",
    "generate_report",
    "resolve_period",
    "ReportPeriod",
    "ReportingConfig",
]
