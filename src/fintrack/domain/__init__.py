"""Domain layer - pure business models with no external dependencies."""

from fintrack.domain.models import (
    Organization,
    OrganizationMember,
    Account,
    Category,
    Transaction,
    AccountType,
    TransactionType,
    TransactionStatus,
    MemberRole,
)

__all__ = [
    "Organization",
    "OrganizationMember",
    "Account",
    "Category",
    "Transaction",
    "AccountType",
    "TransactionType",
    "TransactionStatus",
    "MemberRole",
]
