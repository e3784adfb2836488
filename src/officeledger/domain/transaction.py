"""Transaction (journal entry) domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal
from officeledger.database.base import Database
from officeledger.domain.balances import coerce_amount
from officeledger.domain.entities import Transaction as TransactionEntity
from officeledger.domain.errors import (
    IntegrityError,
    NotFoundError,
    ValidationError,
    account_not_found,
    negative_amount,
    same_account_on_both_legs,
    transaction_not_found,
)
from officeledger.logging_config import get_logger

logger = get_logger("domain.transaction")


class TransactionService:
    """Service for posting and listing journal entries."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        date: date,
        debit_account_id: int,
        credit_account_id: int,
        amount: "Decimal | int | str",
        description: Optional[str] = None,
    ) -> int:
        """Post a journal entry.

        Args:
            date: Entry date
            debit_account_id: Account receiving the debit leg
            credit_account_id: Account receiving the credit leg
            amount: Amount applied to both legs
            description: Optional free text

        Returns:
            Transaction ID

        Raises:
            NotFoundError: If either account doesn't exist
            ValidationError: If both legs hit one account or the amount is
                negative or not a number
        """
        for account_id in (debit_account_id, credit_account_id):
            if self.db.get_account(account_id) is None:
                raise NotFoundError(account_not_found(account_id))

        if debit_account_id == credit_account_id:
            raise ValidationError(same_account_on_both_legs("new", debit_account_id))

        try:
            value = coerce_amount("new", amount)
        except IntegrityError as e:
            raise ValidationError(str(e)) from e
        if value < 0:
            raise ValidationError(negative_amount("new", value))

        transaction_id = self.db.create_transaction(
            date=date,
            debit_account_id=debit_account_id,
            credit_account_id=credit_account_id,
            amount=value,
            description=description,
        )
        logger.info(
            "Posted transaction %s: debit %s, credit %s, amount %s",
            transaction_id,
            debit_account_id,
            credit_account_id,
            value,
        )
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID."""
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[int] = None,
    ) -> list[TransactionEntity]:
        """List transactions with optional date and account filters."""
        return self.db.list_transactions(
            start_date=start_date, end_date=end_date, account_id=account_id
        )

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction not found
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.db.delete_transaction(transaction_id)
