"""Category repository protocol."""

from typing import Protocol, Optional

from fintrack.domain.models import Category, TransactionType


class CategoryRepository(Protocol):
    """Interface for category data access."""

    def create(self, category: Category) -> Category:
        """Persist a new category."""
        ...

    def get_by_id(self, category_id: str) -> Optional[Category]:
        """Retrieve category by ID."""
        ...

    def list_by_organization(
        self,
        organization_id: str,
        category_type: Optional[TransactionType] = None,
    ) -> list[Category]:
        """List categories of an organization, ordered by name."""
        ...

    def update(self, category: Category) -> Category:
        """Update an existing category."""
        ...

    def delete(self, category_id: str) -> None:
        """Delete a category, detaching it from its transactions."""
        ...
