"""SQLAlchemy implementation of OrganizationRepository."""

from typing import Optional

from fintrack.core.exceptions import NotFoundError
from fintrack.core.timezone import now_utc
from fintrack.domain.models import Organization, OrganizationMember
from fintrack.repositories.sqlalchemy.base import SqlAlchemyRepository
from fintrack.repositories.sqlalchemy.orm_models import (
    OrganizationORM,
    OrganizationMemberORM,
)


class SqlAlchemyOrganizationRepository(SqlAlchemyRepository):
    """SQLAlchemy-backed organization and membership repository."""

    def create(self, organization: Organization) -> Organization:
        """Persist a new organization."""
        orm_org = OrganizationORM(
            organization_id=organization.organization_id,
            name=organization.name,
            created_at=organization.created_at or now_utc(),
        )
        with self._write("create organization"):
            self._db.add(orm_org)
        self._db.refresh(orm_org)
        return self._to_domain(orm_org)

    def get_by_id(self, organization_id: str) -> Optional[Organization]:
        """Retrieve organization by ID."""
        orm_org = self._db.query(OrganizationORM).filter(
            OrganizationORM.organization_id == organization_id
        ).first()
        return self._to_domain(orm_org) if orm_org else None

    def update(self, organization: Organization) -> Organization:
        """Update an existing organization."""
        orm_org = self._db.query(OrganizationORM).filter(
            OrganizationORM.organization_id == organization.organization_id
        ).first()
        if not orm_org:
            raise NotFoundError("Organization", organization.organization_id)
        with self._write("update organization"):
            orm_org.name = organization.name
        self._db.refresh(orm_org)
        return self._to_domain(orm_org)

    def list_for_user(self, user_id: str) -> list[Organization]:
        """List organizations the user is a member of."""
        orm_orgs = (
            self._db.query(OrganizationORM)
            .join(OrganizationMemberORM)
            .filter(OrganizationMemberORM.user_id == user_id)
            .order_by(OrganizationORM.name)
            .all()
        )
        return [self._to_domain(o) for o in orm_orgs]

    def add_member(self, member: OrganizationMember) -> OrganizationMember:
        """Persist a new membership."""
        orm_member = OrganizationMemberORM(
            organization_id=member.organization_id,
            user_id=member.user_id,
            role=member.role,
            created_at=member.created_at or now_utc(),
        )
        with self._write("add organization member"):
            self._db.add(orm_member)
        self._db.refresh(orm_member)
        return self._member_to_domain(orm_member)

    def get_member(self, organization_id: str, user_id: str) -> Optional[OrganizationMember]:
        """Retrieve a user's membership in an organization."""
        orm_member = (
            self._db.query(OrganizationMemberORM)
            .filter(
                OrganizationMemberORM.organization_id == organization_id,
                OrganizationMemberORM.user_id == user_id,
            )
            .first()
        )
        return self._member_to_domain(orm_member) if orm_member else None

    def list_members(self, organization_id: str) -> list[OrganizationMember]:
        """List all memberships of an organization."""
        orm_members = (
            self._db.query(OrganizationMemberORM)
            .filter(OrganizationMemberORM.organization_id == organization_id)
            .order_by(OrganizationMemberORM.created_at)
            .all()
        )
        return [self._member_to_domain(m) for m in orm_members]

    @staticmethod
    def _to_domain(orm: OrganizationORM) -> Organization:
        """Convert ORM model to domain model."""
        return Organization(
            organization_id=orm.organization_id,
            name=orm.name,
            created_at=orm.created_at,
        )

    @staticmethod
    def _member_to_domain(orm: OrganizationMemberORM) -> OrganizationMember:
        return OrganizationMember(
            organization_id=orm.organization_id,
            user_id=orm.user_id,
            role=orm.role,
            created_at=orm.created_at,
        )
