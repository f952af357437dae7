"""Repository protocol definitions (interfaces)."""

from fintrack.repositories.protocols.organization_repo import OrganizationRepository
from fintrack.repositories.protocols.account_repo import AccountRepository
from fintrack.repositories.protocols.category_repo import CategoryRepository
from fintrack.repositories.protocols.transaction_repo import TransactionRepository

__all__ = [
    "OrganizationRepository",
    "AccountRepository",
    "CategoryRepository",
    "TransactionRepository",
]
