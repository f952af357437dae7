"""Pydantic schemas for transaction endpoints."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from fintrack.domain.models.enums import TransactionStatus, TransactionType


class TransactionCreateRequest(BaseModel):
    """Request schema for recording a transaction."""

    organization_id: str = Field(..., description="Organization ID")
    account_id: str = Field(..., description="Account ID")
    amount: int = Field(
        ...,
        description="Amount in cents; the stored sign follows txn_type",
    )
    txn_type: TransactionType = Field(..., description="income or expense")
    status: TransactionStatus = Field(default=TransactionStatus.PAID)
    txn_date: Optional[date] = Field(
        default=None,
        description="Transaction date (YYYY-MM-DD); defaults to today",
    )
    category_id: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=500)


class TransactionUpdateRequest(BaseModel):
    """
    Request schema for amending a transaction (partial update).

    Only fields present in the body are applied; ``category_id`` and
    ``description`` can be cleared with an explicit null.
    """

    account_id: Optional[str] = None
    category_id: Optional[str] = None
    amount: Optional[int] = None
    txn_date: Optional[date] = None
    description: Optional[str] = Field(default=None, max_length=500)
    txn_type: Optional[TransactionType] = None
    status: Optional[TransactionStatus] = None


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    transaction_id: str
    organization_id: str
    account_id: str
    category_id: Optional[str] = None
    amount: int
    txn_date: date
    txn_type: TransactionType
    status: TransactionStatus
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    transactions: list[TransactionResponse]
    count: int
