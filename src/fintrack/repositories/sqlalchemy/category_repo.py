"""SQLAlchemy implementation of CategoryRepository."""

from typing import Optional

from fintrack.core.exceptions import NotFoundError
from fintrack.core.timezone import now_utc
from fintrack.domain.models import Category, TransactionType
from fintrack.repositories.sqlalchemy.base import SqlAlchemyRepository
from fintrack.repositories.sqlalchemy.orm_models import CategoryORM, TransactionORM


class SqlAlchemyCategoryRepository(SqlAlchemyRepository):
    """SQLAlchemy-backed category repository."""

    def create(self, category: Category) -> Category:
        """Persist a new category."""
        orm_category = CategoryORM(
            category_id=category.category_id,
            organization_id=category.organization_id,
            name=category.name,
            category_type=category.category_type,
            icon=category.icon,
            created_at=category.created_at or now_utc(),
        )
        with self._write("create category"):
            self._db.add(orm_category)
        self._db.refresh(orm_category)
        return self._to_domain(orm_category)

    def get_by_id(self, category_id: str) -> Optional[Category]:
        """Retrieve category by ID."""
        orm_category = self._db.query(CategoryORM).filter(
            CategoryORM.category_id == category_id
        ).first()
        return self._to_domain(orm_category) if orm_category else None

    def list_by_organization(
        self,
        organization_id: str,
        category_type: Optional[TransactionType] = None,
    ) -> list[Category]:
        """List categories of an organization, ordered by name."""
        query = self._db.query(CategoryORM).filter(
            CategoryORM.organization_id == organization_id
        )
        if category_type is not None:
            query = query.filter(CategoryORM.category_type == category_type)
        return [self._to_domain(c) for c in query.order_by(CategoryORM.name).all()]

    def update(self, category: Category) -> Category:
        """Update an existing category."""
        orm_category = self._db.query(CategoryORM).filter(
            CategoryORM.category_id == category.category_id
        ).first()
        if not orm_category:
            raise NotFoundError("Category", category.category_id)
        with self._write("update category"):
            orm_category.name = category.name
            orm_category.category_type = category.category_type
            orm_category.icon = category.icon
        self._db.refresh(orm_category)
        return self._to_domain(orm_category)

    def delete(self, category_id: str) -> None:
        """Delete a category, detaching it from its transactions."""
        with self._write("delete category"):
            self._db.query(TransactionORM).filter(
                TransactionORM.category_id == category_id
            ).update({TransactionORM.category_id: None}, synchronize_session=False)
            self._db.query(CategoryORM).filter(
                CategoryORM.category_id == category_id
            ).delete(synchronize_session=False)
        self._db.expire_all()

    @staticmethod
    def _to_domain(orm: CategoryORM) -> Category:
        """Convert ORM model to domain model."""
        return Category(
            category_id=orm.category_id,
            organization_id=orm.organization_id,
            name=orm.name,
            category_type=orm.category_type,
            icon=orm.icon,
            created_at=orm.created_at,
        )
