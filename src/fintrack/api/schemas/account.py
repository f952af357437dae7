"""Pydantic schemas for account endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fintrack.domain.models.enums import AccountType


class AccountCreate(BaseModel):
    """Request schema for creating an account."""

    organization_id: str = Field(..., description="Owning organization ID")
    name: str = Field(..., min_length=1, max_length=255, description="Account name")
    account_type: AccountType = Field(default=AccountType.BANK, description="bank, cash or credit")


class AccountUpdate(BaseModel):
    """Request schema for updating an account (partial update). Balance is not patchable."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    account_type: Optional[AccountType] = None


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    account_id: str
    organization_id: str
    name: str
    account_type: AccountType
    balance: int = Field(..., description="Cached balance in cents")
    created_at: Optional[datetime] = None


class AccountListResponse(BaseModel):
    """Response schema for listing accounts."""

    accounts: list[AccountResponse]
    count: int


class ReconcileResponse(BaseModel):
    """Response schema for a balance reconciliation."""

    account_id: str
    previous_balance: int
    computed_balance: int
    drift: int
    corrected: bool
