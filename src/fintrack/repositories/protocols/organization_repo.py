"""Organization repository protocol."""

from typing import Protocol, Optional

from fintrack.domain.models import Organization, OrganizationMember


class OrganizationRepository(Protocol):
    """Interface for organization and membership data access."""

    def create(self, organization: Organization) -> Organization:
        """Persist a new organization."""
        ...

    def get_by_id(self, organization_id: str) -> Optional[Organization]:
        """Retrieve organization by ID."""
        ...

    def update(self, organization: Organization) -> Organization:
        """Update an existing organization."""
        ...

    def list_for_user(self, user_id: str) -> list[Organization]:
        """List organizations the user is a member of."""
        ...

    def add_member(self, member: OrganizationMember) -> OrganizationMember:
        """Persist a new membership."""
        ...

    def get_member(self, organization_id: str, user_id: str) -> Optional[OrganizationMember]:
        """Retrieve a user's membership in an organization."""
        ...

    def list_members(self, organization_id: str) -> list[OrganizationMember]:
        """List all memberships of an organization."""
        ...
