"""
Pytest configuration and fixtures for fintrack tests.

This module provides:
- In-memory SQLite database fixtures
- Repository and service fixtures
- An organization with an owner and a plain member
- Factory helpers for accounts, categories and transactions
- FastAPI test client wired to the test database
"""

import uuid
from datetime import date
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from fintrack.main import app
from fintrack.config.settings import Settings, set_settings, reset_settings
from fintrack.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from fintrack.repositories.sqlalchemy import orm_models  # noqa: F401
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
    TransactionCreate,
)
from fintrack.domain.models import (
    Account,
    AccountType,
    Category,
    MemberRole,
    Organization,
    Transaction,
    TransactionStatus,
    TransactionType,
)

OWNER_ID = "user-owner"
MEMBER_ID = "user-member"
OUTSIDER_ID = "user-outsider"


def auth(user_id: str) -> dict[str, str]:
    """Headers identifying the caller to the API."""
    return {"X-User-Id": user_id}


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def organization_repo(test_session) -> SqlAlchemyOrganizationRepository:
    return SqlAlchemyOrganizationRepository(test_session)


@pytest.fixture
def account_repo(test_session) -> SqlAlchemyAccountRepository:
    return SqlAlchemyAccountRepository(test_session)


@pytest.fixture
def category_repo(test_session) -> SqlAlchemyCategoryRepository:
    return SqlAlchemyCategoryRepository(test_session)


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    return SqlAlchemyTransactionRepository(test_session)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def access(organization_repo) -> OrganizationAccess:
    return OrganizationAccess(organization_repo)


@pytest.fixture
def organization_service(access, organization_repo) -> OrganizationService:
    return OrganizationService(access=access, organization_repo=organization_repo)


@pytest.fixture
def account_service(access, account_repo) -> AccountService:
    return AccountService(access=access, account_repo=account_repo)


@pytest.fixture
def category_service(access, category_repo) -> CategoryService:
    return CategoryService(access=access, category_repo=category_repo)


@pytest.fixture
def ledger(access, account_repo, category_repo, transaction_repo) -> BalanceLedgerPolicy:
    """Provide test BalanceLedgerPolicy."""
    return BalanceLedgerPolicy(
        access=access,
        account_repo=account_repo,
        category_repo=category_repo,
        transaction_repo=transaction_repo,
    )


@pytest.fixture
def summary_service(access, account_repo, category_repo, transaction_repo) -> SummaryService:
    return SummaryService(
        access=access,
        account_repo=account_repo,
        category_repo=category_repo,
        transaction_repo=transaction_repo,
    )


# =============================================================================
# PRESET DATA FIXTURES
# =============================================================================


@pytest.fixture
def organization(organization_service) -> Organization:
    """Organization owned by OWNER_ID with MEMBER_ID as a plain member."""
    org = organization_service.create_organization(OWNER_ID, "Household")
    organization_service.add_member(OWNER_ID, org.organization_id, MEMBER_ID, MemberRole.MEMBER)
    return org


@pytest.fixture
def other_organization(organization_service) -> Organization:
    """Organization OWNER_ID and MEMBER_ID do not belong to."""
    return organization_service.create_organization(OUTSIDER_ID, "Elsewhere")


@pytest.fixture
def account_factory(account_service, organization) -> Callable[..., Account]:
    """Factory for creating test accounts."""

    def _create_account(
        name: Optional[str] = None,
        account_type: AccountType = AccountType.BANK,
        organization_id: Optional[str] = None,
        user_id: str = OWNER_ID,
    ) -> Account:
        if name is None:
            name = f"Account {uuid.uuid4().hex[:8]}"
        return account_service.create_account(
            user_id,
            organization_id=organization_id or organization.organization_id,
            name=name,
            account_type=account_type,
        )

    return _create_account


@pytest.fixture
def category_factory(category_service, organization) -> Callable[..., Category]:
    """Factory for creating test categories."""

    def _create_category(
        name: Optional[str] = None,
        category_type: TransactionType = TransactionType.EXPENSE,
        organization_id: Optional[str] = None,
        user_id: str = OWNER_ID,
    ) -> Category:
        if name is None:
            name = f"Category {uuid.uuid4().hex[:8]}"
        return category_service.create_category(
            user_id,
            organization_id=organization_id or organization.organization_id,
            name=name,
            category_type=category_type,
        )

    return _create_category


@pytest.fixture
def transaction_factory(ledger, organization) -> Callable[..., Transaction]:
    """Factory for recording test transactions through the ledger."""

    def _record(
        account_id: str,
        amount: int,
        txn_type: TransactionType = TransactionType.INCOME,
        status: TransactionStatus = TransactionStatus.PAID,
        txn_date: Optional[date] = None,
        category_id: Optional[str] = None,
        description: Optional[str] = None,
        user_id: str = MEMBER_ID,
    ) -> Transaction:
        return ledger.record_transaction(
            user_id,
            TransactionCreate(
                organization_id=organization.organization_id,
                account_id=account_id,
                amount=amount,
                txn_type=txn_type,
                status=status,
                txn_date=txn_date or date(2024, 6, 15),
                category_id=category_id,
                description=description,
            ),
        )

    return _record


@pytest.fixture
def sample_account(account_factory) -> Account:
    """A zero-balance bank account."""
    return account_factory(name="Checking")


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    set_settings(Settings(database_url="sqlite:///:memory:"))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


@pytest.fixture
def api_organization(client: TestClient) -> dict:
    """Organization created through the API by OWNER_ID, with MEMBER_ID added."""
    response = client.post("/organizations", json={"name": "Household"}, headers=auth(OWNER_ID))
    org = response.json()
    client.post(
        f"/organizations/{org['organization_id']}/members",
        json={"user_id": MEMBER_ID, "role": "member"},
        headers=auth(OWNER_ID),
    )
    return org


@pytest.fixture
def api_account(client: TestClient, api_organization: dict) -> dict:
    """Bank account created through the API."""
    response = client.post(
        "/accounts",
        json={
            "organization_id": api_organization["organization_id"],
            "name": "Checking",
            "account_type": "bank",
        },
        headers=auth(OWNER_ID),
    )
    return response.json()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def paid_sum(transaction_repo: SqlAlchemyTransactionRepository, account_id: str) -> int:
    """Signed sum of paid amounts, recomputed straight from the rows."""
    return transaction_repo.sum_paid_amounts(account_id)
