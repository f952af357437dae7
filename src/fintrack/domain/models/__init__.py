"""Domain models package."""

from fintrack.domain.models.enums import (
    AccountType,
    TransactionType,
    TransactionStatus,
    MemberRole,
)
from fintrack.domain.models.organization import Organization, OrganizationMember
from fintrack.domain.models.account import Account
from fintrack.domain.models.category import Category
from fintrack.domain.models.transaction import (
    Transaction,
    MAX_AMOUNT_CENTS,
    signed_amount,
)

__all__ = [
    "AccountType",
    "TransactionType",
    "TransactionStatus",
    "MemberRole",
    "Organization",
    "OrganizationMember",
    "Account",
    "Category",
    "Transaction",
    "MAX_AMOUNT_CENTS",
    "signed_amount",
]
