"""API routers package."""

from fintrack.api.routers.organizations import router as organizations_router
from fintrack.api.routers.accounts import router as accounts_router
from fintrack.api.routers.categories import router as categories_router
from fintrack.api.routers.transactions import router as transactions_router

__all__ = [
    "organizations_router",
    "accounts_router",
    "categories_router",
    "transactions_router",
]
