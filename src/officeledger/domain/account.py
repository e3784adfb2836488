"""Account domain service."""

from typing import Optional
from officeledger.database.base import Database
from officeledger.domain.entities import (
    Account as AccountEntity,
    AccountRole,
    AccountType,
    NormalBalance,
    infer_role,
)
from officeledger.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    account_delete_blocked,
    account_name_not_found,
    account_not_found,
    duplicate_account_name,
)
from officeledger.logging_config import get_logger

logger = get_logger("domain.account")


def _parse_enum(enum_cls, value, label: str):
    if value is None or isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if str(value).strip().lower() in (member.value.lower(), member.name.lower()):
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise ValidationError(f"Invalid {label} '{value}'. Expected one of: {choices}")


class AccountService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self,
        name: str,
        account_type: "AccountType | str",
        normal_balance: "NormalBalance | str | None" = None,
        role: "AccountRole | str | None" = None,
    ) -> int:
        """Create a new account.

        The account role is resolved here, once: when none is given it is
        inferred from the conventional names ("Drawings", "Cost of Goods
        Sold") and stored, so later renames do not change how the account is
        reported.

        Args:
            name: Account name
            account_type: Asset, Liability, Equity, Revenue or Expense
            normal_balance: Optional explicit normal balance side
            role: Optional structural role (drawings, cogs)

        Returns:
            Account ID

        Raises:
            ValidationError: If the name is blank or a value is not recognized
            ConflictError: If account name already exists
        """
        name = name.strip() if name else ""
        if not name:
            raise ValidationError("Account name cannot be empty")

        account_type = _parse_enum(AccountType, account_type, "account type")
        normal_balance = _parse_enum(NormalBalance, normal_balance, "normal balance")
        role = _parse_enum(AccountRole, role, "account role") or infer_role(name)

        if self.db.get_account_by_name(name) is not None:
            raise ConflictError(duplicate_account_name(name))

        account_id = self.db.create_account(
            name=name,
            account_type=account_type,
            normal_balance=normal_balance,
            role=role,
        )
        logger.info("Created account %s '%s' (%s)", account_id, name, account_type.value)
        return account_id

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts."""
        return self.db.list_accounts()

    def resolve_account(self, account: "str | int") -> AccountEntity:
        """Resolve an account by ID or name.

        Numeric strings are tried as an ID first, then as a name.

        Raises:
            NotFoundError: If no account matches
        """
        if isinstance(account, int):
            found = self.db.get_account(account)
            if found is None:
                raise NotFoundError(account_not_found(account))
            return found

        text = str(account).strip()
        if text.isdigit():
            found = self.db.get_account(int(text))
            if found is not None:
                return found
        found = self.db.get_account_by_name(text)
        if found is None:
            raise NotFoundError(account_name_not_found(text))
        return found

    def rename_account(self, account_id: int, name: str) -> None:
        """Rename an account.

        Raises:
            NotFoundError: If account not found
            ConflictError: If the new name already exists
        """
        name = name.strip() if name else ""
        if not name:
            raise ValidationError("Account name cannot be empty")

        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        existing = self.db.get_account_by_name(name)
        if existing is not None and existing.id != account_id:
            raise ConflictError(duplicate_account_name(name))

        self.db.update_account_name(account_id=account_id, name=name)

    def delete_account(self, account_id: int) -> None:
        """Delete an account.

        Raises:
            NotFoundError: If account not found
            DependencyError: If transactions still reference the account
        """
        if self.db.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))

        transaction_count = self.db.get_account_transaction_count(account_id)
        if transaction_count > 0:
            raise DependencyError(account_delete_blocked(account_id, transaction_count))

        self.db.delete_account(account_id)
        logger.info("Deleted account %s", account_id)
