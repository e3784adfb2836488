"""Mapper functions to convert between domain models and SQLAlchemy models.

Accounts store their type, normal balance and role as plain strings; the
domain entity turns them back into enums. A NULL role stays unset: roles are
resolved when an account is created, never from its current name.
"""

from officeledger.domain import entities as domain
from officeledger.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        type=domain.AccountType(orm_account.account_type),
        normal_balance=(
            domain.NormalBalance(orm_account.normal_balance)
            if orm_account.normal_balance
            else None
        ),
        role=domain.AccountRole(orm_account.role) if orm_account.role else None,
        created_at=orm_account.created_at,
        infer_role_from_name=False,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        debit_account_id=orm_transaction.debit_account_id,
        credit_account_id=orm_transaction.credit_account_id,
        amount=orm_transaction.amount,
        created_at=orm_transaction.created_at,
    )
