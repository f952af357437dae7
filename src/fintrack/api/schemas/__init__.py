"""Pydantic schemas for API request/response."""

from fintrack.api.schemas.organization import (
    OrganizationCreate,
    OrganizationUpdate,
    OrganizationResponse,
    OrganizationListResponse,
    MemberCreate,
    MemberResponse,
    MemberListResponse,
)
from fintrack.api.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountListResponse,
    ReconcileResponse,
)
from fintrack.api.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryListResponse,
)
from fintrack.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
    TransactionListResponse,
)
from fintrack.api.schemas.summary import SummaryResponse

__all__ = [
    "OrganizationCreate",
    "OrganizationUpdate",
    "OrganizationResponse",
    "OrganizationListResponse",
    "MemberCreate",
    "MemberResponse",
    "MemberListResponse",
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "AccountListResponse",
    "ReconcileResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryListResponse",
    "TransactionCreateRequest",
    "TransactionUpdateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "SummaryResponse",
]
