"""Pydantic schemas for organization endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fintrack.domain.models.enums import MemberRole


class OrganizationCreate(BaseModel):
    """Request schema for creating an organization."""

    name: str = Field(..., min_length=1, max_length=255, description="Organization name")


class OrganizationUpdate(BaseModel):
    """Request schema for renaming an organization."""

    name: str = Field(..., min_length=1, max_length=255)


class OrganizationResponse(BaseModel):
    """Response schema for a single organization."""

    model_config = {"from_attributes": True}

    organization_id: str
    name: str
    created_at: Optional[datetime] = None


class OrganizationListResponse(BaseModel):
    organizations: list[OrganizationResponse]
    count: int


class MemberCreate(BaseModel):
    """Request schema for adding a member."""

    user_id: str = Field(..., min_length=1, max_length=64)
    role: MemberRole = Field(default=MemberRole.MEMBER)


class MemberResponse(BaseModel):
    model_config = {"from_attributes": True}

    organization_id: str
    user_id: str
    role: MemberRole
    created_at: Optional[datetime] = None


class MemberListResponse(BaseModel):
    members: list[MemberResponse]
    count: int
