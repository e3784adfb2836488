"""Tests for TransactionService."""

from datetime import date
from decimal import Decimal

import pytest

from officeledger.domain.errors import NotFoundError, ValidationError


class TestTransactionService:
    """Tests for TransactionService."""

    def test_create_transaction(self, transaction_service, sample_accounts):
        cash = sample_accounts["Cash"]
        capital = sample_accounts["Capital"]

        txn_id = transaction_service.create_transaction(
            date=date(2026, 3, 1),
            debit_account_id=cash.id,
            credit_account_id=capital.id,
            amount=Decimal("1000"),
            description="Owner investment",
        )

        txn = transaction_service.get_transaction(txn_id)
        assert txn.debit_account_id == cash.id
        assert txn.credit_account_id == capital.id
        assert txn.amount == Decimal("1000")
        assert txn.description == "Owner investment"

    @pytest.mark.parametrize("amount", ["1,250.50", 1250.5, Decimal("1250.50")])
    def test_create_transaction_amount_forms(self, transaction_service, sample_accounts, amount):
        txn_id = transaction_service.create_transaction(
            date(2026, 3, 1), sample_accounts["Cash"].id, sample_accounts["Sales"].id, amount
        )

        assert transaction_service.get_transaction(txn_id).amount == Decimal("1250.50")

    def test_create_transaction_unknown_account(self, transaction_service, sample_accounts):
        with pytest.raises(NotFoundError, match="Account 999 not found"):
            transaction_service.create_transaction(
                date(2026, 3, 1), sample_accounts["Cash"].id, 999, "10"
            )

    def test_create_transaction_same_account(self, transaction_service, sample_accounts):
        cash = sample_accounts["Cash"]

        with pytest.raises(ValidationError, match="same account"):
            transaction_service.create_transaction(date(2026, 3, 1), cash.id, cash.id, "10")

    def test_create_transaction_negative_amount(self, transaction_service, sample_accounts):
        with pytest.raises(ValidationError, match="negative amount"):
            transaction_service.create_transaction(
                date(2026, 3, 1), sample_accounts["Cash"].id, sample_accounts["Sales"].id, "-10"
            )

    def test_create_transaction_invalid_amount(self, transaction_service, sample_accounts):
        with pytest.raises(ValidationError, match="invalid amount"):
            transaction_service.create_transaction(
                date(2026, 3, 1), sample_accounts["Cash"].id, sample_accounts["Sales"].id, "ten"
            )

    def test_list_transactions_by_account(self, transaction_service, sample_accounts):
        cash = sample_accounts["Cash"]
        rent = sample_accounts["Rent Expense"]
        transaction_service.create_transaction(
            date(2026, 3, 1), cash.id, sample_accounts["Capital"].id, "500"
        )
        transaction_service.create_transaction(date(2026, 3, 2), rent.id, cash.id, "100")

        assert len(transaction_service.list_transactions(account_id=cash.id)) == 2
        assert len(transaction_service.list_transactions(account_id=rent.id)) == 1
        assert (
            len(transaction_service.list_transactions(start_date=date(2026, 3, 2))) == 1
        )

    def test_delete_transaction(self, transaction_service, sample_accounts):
        txn_id = transaction_service.create_transaction(
            date(2026, 3, 1), sample_accounts["Cash"].id, sample_accounts["Sales"].id, "10"
        )

        transaction_service.delete_transaction(txn_id)

        assert transaction_service.get_transaction(txn_id) is None

    def test_delete_missing_transaction(self, transaction_service):
        with pytest.raises(NotFoundError, match="Transaction 5 not found"):
            transaction_service.delete_transaction(5)
