"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from fintrack.repositories.sqlalchemy.database import get_db
from fintrack.repositories.sqlalchemy import (
    SqlAlchemyOrganizationRepository,
    SqlAlchemyAccountRepository,
    SqlAlchemyCategoryRepository,
    SqlAlchemyTransactionRepository,
)
from fintrack.services import (
    OrganizationAccess,
    BalanceLedgerPolicy,
    OrganizationService,
    AccountService,
    CategoryService,
    SummaryService,
)


def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> Optional[str]:
    """Identity of the caller as asserted by the upstream auth proxy."""
    if x_user_id is None:
        return None
    return x_user_id.strip() or None


def get_organization_repo(db: Session = Depends(get_db)) -> SqlAlchemyOrganizationRepository:
    """Provide OrganizationRepository instance."""
    return SqlAlchemyOrganizationRepository(db)


def get_account_repo(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(db)


def get_category_repo(db: Session = Depends(get_db)) -> SqlAlchemyCategoryRepository:
    """Provide CategoryRepository instance."""
    return SqlAlchemyCategoryRepository(db)


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_access(
    organization_repo: SqlAlchemyOrganizationRepository = Depends(get_organization_repo),
) -> OrganizationAccess:
    return OrganizationAccess(organization_repo)


def get_organization_service(
    access: OrganizationAccess = Depends(get_access),
    organization_repo: SqlAlchemyOrganizationRepository = Depends(get_organization_repo),
) -> OrganizationService:
    """Provide OrganizationService instance."""
    return OrganizationService(access=access, organization_repo=organization_repo)


def get_account_service(
    access: OrganizationAccess = Depends(get_access),
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> AccountService:
    """Provide AccountService instance."""
    return AccountService(access=access, account_repo=account_repo)


def get_category_service(
    access: OrganizationAccess = Depends(get_access),
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
) -> CategoryService:
    """Provide CategoryService instance."""
    return CategoryService(access=access, category_repo=category_repo)


def get_balance_ledger(
    access: OrganizationAccess = Depends(get_access),
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> BalanceLedgerPolicy:
    """Provide BalanceLedgerPolicy instance."""
    return BalanceLedgerPolicy(
        access=access,
        account_repo=account_repo,
        category_repo=category_repo,
        transaction_repo=transaction_repo,
    )


def get_summary_service(
    access: OrganizationAccess = Depends(get_access),
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    category_repo: SqlAlchemyCategoryRepository = Depends(get_category_repo),
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> SummaryService:
    """Provide SummaryService instance."""
    return SummaryService(
        access=access,
        account_repo=account_repo,
        category_repo=category_repo,
        transaction_repo=transaction_repo,
    )
