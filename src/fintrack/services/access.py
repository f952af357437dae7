"""Organization-scoped authorization checks."""

from typing import Optional

from fintrack.core.exceptions import AuthenticationError, AuthorizationError
from fintrack.domain.models import MemberRole, OrganizationMember
from fintrack.repositories.protocols import OrganizationRepository


class OrganizationAccess:
    """
    Capability check: does principal P hold role R in organization O.

    Two variants exist: any membership, or the owner role. Callers pass the
    authenticated user id; ``None`` means nobody is signed in.
    """

    def __init__(self, organization_repo: OrganizationRepository):
        self._organization_repo = organization_repo

    def require_member(
        self,
        user_id: Optional[str],
        organization_id: str,
    ) -> OrganizationMember:
        """Return the caller's membership or raise AuthorizationError."""
        return self._require(user_id, organization_id, role=None)

    def require_owner(
        self,
        user_id: Optional[str],
        organization_id: str,
    ) -> OrganizationMember:
        """Return the caller's owner membership or raise AuthorizationError."""
        return self._require(user_id, organization_id, role=MemberRole.OWNER)

    def _require(
        self,
        user_id: Optional[str],
        organization_id: str,
        role: Optional[MemberRole],
    ) -> OrganizationMember:
        if not user_id:
            raise AuthenticationError()

        member = self._organization_repo.get_member(organization_id, user_id)
        if member is None:
            raise AuthorizationError("You do not have access to this organization")
        if role is not None and member.role != role:
            raise AuthorizationError(
                f"Only the organization {role.value} can perform this action"
            )
        return member
