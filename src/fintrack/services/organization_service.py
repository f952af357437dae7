"""Organization and membership management."""

import logging
import uuid
from typing import Optional

from fintrack.core.timezone import now_utc
from fintrack.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from fintrack.domain.models import MemberRole, Organization, OrganizationMember
from fintrack.repositories.protocols import OrganizationRepository
from fintrack.services.access import OrganizationAccess
from fintrack.services.validation import clean_name

logger = logging.getLogger(__name__)


class OrganizationService:
    """Creates organizations and manages who belongs to them."""

    def __init__(
        self,
        access: OrganizationAccess,
        organization_repo: OrganizationRepository,
    ):
        self._access = access
        self._organization_repo = organization_repo

    def create_organization(self, user_id: Optional[str], name: str) -> Organization:
        """Create an organization; the caller becomes its owner."""
        if not user_id:
            raise AuthenticationError()
        organization = Organization(
            organization_id=str(uuid.uuid4()),
            name=clean_name(name, "Organization"),
            created_at=now_utc(),
        )
        created = self._organization_repo.create(organization)
        self._organization_repo.add_member(
            OrganizationMember(
                organization_id=created.organization_id,
                user_id=user_id,
                role=MemberRole.OWNER,
                created_at=now_utc(),
            )
        )
        logger.debug("Organization created: %s", created.organization_id)
        return created

    def get_organization(self, user_id: Optional[str], organization_id: str) -> Organization:
        organization = self._organization_repo.get_by_id(organization_id)
        if not organization:
            raise NotFoundError("Organization", organization_id)
        self._access.require_member(user_id, organization_id)
        return organization

    def list_organizations(self, user_id: Optional[str]) -> list[Organization]:
        """List organizations the caller belongs to."""
        if not user_id:
            raise AuthenticationError()
        return self._organization_repo.list_for_user(user_id)

    def rename_organization(
        self,
        user_id: Optional[str],
        organization_id: str,
        name: str,
    ) -> Organization:
        """Rename an organization. Owner only."""
        organization = self._organization_repo.get_by_id(organization_id)
        if not organization:
            raise NotFoundError("Organization", organization_id)
        self._access.require_owner(user_id, organization_id)
        organization.name = clean_name(name, "Organization")
        return self._organization_repo.update(organization)

    def add_member(
        self,
        user_id: Optional[str],
        organization_id: str,
        new_user_id: str,
        role: MemberRole = MemberRole.MEMBER,
    ) -> OrganizationMember:
        """Add a user to an organization. Owner only."""
        if not self._organization_repo.get_by_id(organization_id):
            raise NotFoundError("Organization", organization_id)
        self._access.require_owner(user_id, organization_id)
        if not new_user_id or not new_user_id.strip():
            raise ValidationError("user_id is required")
        try:
            role = MemberRole(role)
        except ValueError as exc:
            raise ValidationError(f"Invalid member role: {role}") from exc
        if self._organization_repo.get_member(organization_id, new_user_id):
            raise ValidationError(f"User '{new_user_id}' is already a member")
        return self._organization_repo.add_member(
            OrganizationMember(
                organization_id=organization_id,
                user_id=new_user_id,
                role=role,
                created_at=now_utc(),
            )
        )

    def list_members(self, user_id: Optional[str], organization_id: str) -> list[OrganizationMember]:
        self._access.require_member(user_id, organization_id)
        return self._organization_repo.list_members(organization_id)
