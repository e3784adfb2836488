"""Shared domain error messages and error types."""

from typing import Any


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class IntegrityError(DomainError):
    """Transaction data that would break the double-entry invariant."""

    def __init__(self, transaction_id: Any, message: str):
        super().__init__(message)
        self.transaction_id = transaction_id


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_name_not_found(name: str) -> str:
    """Return message for missing account by name."""
    return f"Account '{name}' not found"


def duplicate_account_name(name: str) -> str:
    """Return message for duplicate account name."""
    return f"Account with name '{name}' already exists"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def account_delete_blocked(account_id: int, transaction_count: int) -> str:
    """Return message when account is referenced by journal entries."""
    return (
        f"Cannot delete account {account_id}: it is used by "
        f"{transaction_count} transaction{'s' if transaction_count != 1 else ''}. "
        "Please delete or repost them first."
    )


def unknown_account_reference(transaction_id: Any, side: str, account_id: Any) -> str:
    """Return message for a transaction leg pointing at an unknown account."""
    return f"Transaction {transaction_id} references unknown {side} account {account_id}"


def same_account_on_both_legs(transaction_id: Any, account_id: Any) -> str:
    """Return message for a transaction debiting and crediting one account."""
    return (
        f"Transaction {transaction_id} debits and credits the same account {account_id}"
    )


def invalid_amount(transaction_id: Any, amount: Any) -> str:
    """Return message for a non-numeric or non-finite amount."""
    return f"Transaction {transaction_id} has invalid amount {amount!r}"


def negative_amount(transaction_id: Any, amount: Any) -> str:
    """Return message for a negative amount."""
    return f"Transaction {transaction_id} has negative amount {amount}"
