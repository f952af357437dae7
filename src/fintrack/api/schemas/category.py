"""Pydantic schemas for category endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fintrack.domain.models.enums import TransactionType


class CategoryCreate(BaseModel):
    """Request schema for creating a category."""

    organization_id: str
    name: str = Field(..., min_length=1, max_length=255)
    category_type: TransactionType
    icon: Optional[str] = Field(default=None, max_length=64)


class CategoryUpdate(BaseModel):
    """Request schema for updating a category. Sending ``icon: null`` clears it."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    category_type: Optional[TransactionType] = None
    icon: Optional[str] = Field(default=None, max_length=64)


class CategoryResponse(BaseModel):
    model_config = {"from_attributes": True}

    category_id: str
    organization_id: str
    name: str
    category_type: TransactionType
    icon: Optional[str] = None
    created_at: Optional[datetime] = None


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse]
    count: int
