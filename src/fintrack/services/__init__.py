"""Service layer - business logic orchestration."""

from fintrack.services.access import OrganizationAccess
from fintrack.services.balance_ledger import (
    BalanceLedgerPolicy,
    TransactionCreate,
    TransactionUpdate,
    UNSET,
)
from fintrack.services.organization_service import OrganizationService
from fintrack.services.account_service import AccountService
from fintrack.services.category_service import CategoryService
from fintrack.services.summary_service import SummaryService

__all__ = [
    "OrganizationAccess",
    "BalanceLedgerPolicy",
    "TransactionCreate",
    "TransactionUpdate",
    "UNSET",
    "OrganizationService",
    "AccountService",
    "CategoryService",
    "SummaryService",
]
