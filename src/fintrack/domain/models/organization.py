"""Organization (tenant) domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from fintrack.domain.models.enums import MemberRole


@dataclass
class Organization:
    """
    Tenant boundary.

    Every account, category and transaction belongs to exactly one organization.
    """

    organization_id: str
    name: str
    created_at: Optional[datetime] = field(default=None)


@dataclass
class OrganizationMember:
    """A user's membership in an organization."""

    organization_id: str
    user_id: str
    role: MemberRole = MemberRole.MEMBER
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.role, str):
            self.role = MemberRole(self.role)

    @property
    def is_owner(self) -> bool:
        return self.role == MemberRole.OWNER
