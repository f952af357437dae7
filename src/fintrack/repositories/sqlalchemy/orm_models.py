"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    BigInteger,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from fintrack.core.timezone import now_utc
from fintrack.repositories.sqlalchemy.database import Base
from fintrack.domain.models.enums import (
    AccountType,
    MemberRole,
    TransactionStatus,
    TransactionType,
)


class OrganizationORM(Base):
    """SQLAlchemy model for Organization."""

    __tablename__ = "organizations"

    organization_id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_utc)

    members = relationship("OrganizationMemberORM", back_populates="organization")


class OrganizationMemberORM(Base):
    """SQLAlchemy model for OrganizationMember."""

    __tablename__ = "organization_members"

    organization_id = Column(
        String(36), ForeignKey("organizations.organization_id"), primary_key=True
    )
    user_id = Column(String(64), primary_key=True)
    role = Column(SqlEnum(MemberRole), nullable=False, default=MemberRole.MEMBER)
    created_at = Column(DateTime, nullable=False, default=now_utc)

    organization = relationship("OrganizationORM", back_populates="members")


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    account_id = Column(String(36), primary_key=True)
    organization_id = Column(
        String(36), ForeignKey("organizations.organization_id"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    account_type = Column(SqlEnum(AccountType), nullable=False, default=AccountType.BANK)
    # Cents; cached sum of paid transaction amounts
    balance = Column(BigInteger, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=now_utc)

    transactions = relationship("TransactionORM", back_populates="account")


class CategoryORM(Base):
    """SQLAlchemy model for Category."""

    __tablename__ = "categories"

    category_id = Column(String(36), primary_key=True)
    organization_id = Column(
        String(36), ForeignKey("organizations.organization_id"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    category_type = Column(SqlEnum(TransactionType), nullable=False)
    icon = Column(String(64), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc)


class TransactionORM(Base):
    """SQLAlchemy model for Transaction."""

    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_account_status", "account_id", "status"),
    )

    transaction_id = Column(String(36), primary_key=True)
    organization_id = Column(
        String(36), ForeignKey("organizations.organization_id"), nullable=False, index=True
    )
    account_id = Column(String(36), ForeignKey("accounts.account_id"), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.category_id"), nullable=True)
    # Signed cents: + income, - expense
    amount = Column(BigInteger, nullable=False)
    txn_date = Column(Date, nullable=False)
    txn_type = Column(SqlEnum(TransactionType), nullable=False)
    status = Column(SqlEnum(TransactionStatus), nullable=False, default=TransactionStatus.PAID)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc)

    account = relationship("AccountORM", back_populates="transactions")
