"""SQLAlchemy models for officeledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    CheckConstraint,
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Chart of accounts model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    account_type = Column(String, nullable=False)
    normal_balance = Column(String, nullable=True)
    role = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    debit_transactions = relationship(
        "Transaction",
        foreign_keys="Transaction.debit_account_id",
        back_populates="debit_account",
    )
    credit_transactions = relationship(
        "Transaction",
        foreign_keys="Transaction.credit_account_id",
        back_populates="credit_account",
    )


class Transaction(Base):
    """Journal entry model with one debit leg and one credit leg."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    debit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    credit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("debit_account_id != credit_account_id", name="ck_distinct_legs"),
        CheckConstraint("amount >= 0", name="ck_non_negative_amount"),
    )

    # Relationships
    debit_account = relationship(
        "Account", foreign_keys=[debit_account_id], back_populates="debit_transactions"
    )
    credit_account = relationship(
        "Account", foreign_keys=[credit_account_id], back_populates="credit_transactions"
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
