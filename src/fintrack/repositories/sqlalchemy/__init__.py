"""SQLAlchemy repository implementations."""

from fintrack.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from fintrack.repositories.sqlalchemy.organization_repo import SqlAlchemyOrganizationRepository
from fintrack.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from fintrack.repositories.sqlalchemy.category_repo import SqlAlchemyCategoryRepository
from fintrack.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyOrganizationRepository",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyTransactionRepository",
]
