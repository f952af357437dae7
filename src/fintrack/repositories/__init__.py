"""Repository layer - data access abstractions and implementations."""

from fintrack.repositories.protocols import (
    OrganizationRepository,
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)

__all__ = [
    "OrganizationRepository",
    "AccountRepository",
    "CategoryRepository",
    "TransactionRepository",
]
