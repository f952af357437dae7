"""Organization and membership endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from fintrack.api.deps import (
    get_current_user_id,
    get_organization_service,
    get_summary_service,
)
from fintrack.api.schemas import (
    OrganizationCreate,
    OrganizationUpdate,
    OrganizationResponse,
    OrganizationListResponse,
    MemberCreate,
    MemberResponse,
    MemberListResponse,
    SummaryResponse,
)
from fintrack.services import OrganizationService, SummaryService

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.post("", response_model=OrganizationResponse, status_code=201)
def create_organization(
    data: OrganizationCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: OrganizationService = Depends(get_organization_service),
) -> OrganizationResponse:
    """Create an organization owned by the caller."""
    organization = service.create_organization(user_id, data.name)
    return OrganizationResponse.model_validate(organization)


@router.get("", response_model=OrganizationListResponse)
def list_organizations(
    user_id: Optional[str] = Depends(get_current_user_id),
    service: OrganizationService = Depends(get_organization_service),
) -> OrganizationListResponse:
    """List organizations the caller belongs to."""
    organizations = service.list_organizations(user_id)
    return OrganizationListResponse(
        organizations=[OrganizationResponse.model_validate(o) for o in organizations],
        count=len(organizations),
    )


@router.get("/{organization_id}", response_model=OrganizationResponse)
def get_organization(
    organization_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: OrganizationService = Depends(get_organization_service),
) -> OrganizationResponse:
    return OrganizationResponse.model_validate(
        service.get_organization(user_id, organization_id)
    )


@router.patch("/{organization_id}", response_model=OrganizationResponse)
def rename_organization(
    organization_id: str,
    data: OrganizationUpdate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: OrganizationService = Depends(get_organization_service),
) -> OrganizationResponse:
    """Rename an organization (owner only)."""
    organization = service.rename_organization(user_id, organization_id, data.name)
    return OrganizationResponse.model_validate(organization)


@router.post("/{organization_id}/members", response_model=MemberResponse, status_code=201)
def add_member(
    organization_id: str,
    data: MemberCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: OrganizationService = Depends(get_organization_service),
) -> MemberResponse:
    """Add a member to an organization (owner only)."""
    member = service.add_member(user_id, organization_id, data.user_id, data.role)
    return MemberResponse.model_validate(member)


@router.get("/{organization_id}/members", response_model=MemberListResponse)
def list_members(
    organization_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: OrganizationService = Depends(get_organization_service),
) -> MemberListResponse:
    members = service.list_members(user_id, organization_id)
    return MemberListResponse(
        members=[MemberResponse.model_validate(m) for m in members],
        count=len(members),
    )


@router.get("/{organization_id}/summary", response_model=SummaryResponse)
def get_summary(
    organization_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: SummaryService = Depends(get_summary_service),
) -> SummaryResponse:
    """Dashboard totals for an organization."""
    return SummaryResponse.model_validate(service.get_summary(user_id, organization_id))
