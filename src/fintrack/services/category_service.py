"""Category management."""

import logging
import uuid
from typing import Any, Optional, Union

from fintrack.core.timezone import now_utc
from fintrack.core.exceptions import NotFoundError, ValidationError
from fintrack.domain.models import Category, TransactionType
from fintrack.repositories.protocols import CategoryRepository
from fintrack.services.access import OrganizationAccess
from fintrack.services.balance_ledger import UNSET
from fintrack.services.validation import clean_name

logger = logging.getLogger(__name__)


class CategoryService:
    """CRUD for income and expense categories."""

    def __init__(
        self,
        access: OrganizationAccess,
        category_repo: CategoryRepository,
    ):
        self._access = access
        self._category_repo = category_repo

    def create_category(
        self,
        user_id: Optional[str],
        organization_id: str,
        name: str,
        category_type: Union[TransactionType, str],
        icon: Optional[str] = None,
    ) -> Category:
        category = Category(
            category_id=str(uuid.uuid4()),
            organization_id=organization_id,
            name=clean_name(name, "Category"),
            category_type=self._coerce_type(category_type),
            icon=icon or None,
            created_at=now_utc(),
        )
        self._access.require_member(user_id, organization_id)
        created = self._category_repo.create(category)
        logger.debug("Category created: %s", created.category_id)
        return created

    def get_category(self, user_id: Optional[str], category_id: str) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        self._access.require_member(user_id, category.organization_id)
        return category

    def list_categories(
        self,
        user_id: Optional[str],
        organization_id: str,
        category_type: Optional[Union[TransactionType, str]] = None,
    ) -> list[Category]:
        self._access.require_member(user_id, organization_id)
        wanted = self._coerce_type(category_type) if category_type is not None else None
        return self._category_repo.list_by_organization(organization_id, wanted)

    def update_category(
        self,
        user_id: Optional[str],
        category_id: str,
        name: Optional[str] = None,
        category_type: Optional[Union[TransactionType, str]] = None,
        icon: Any = UNSET,
    ) -> Category:
        """Update a category. ``icon=None`` clears the icon."""
        category = self.get_category(user_id, category_id)
        if name is not None:
            category.name = clean_name(name, "Category")
        if category_type is not None:
            category.category_type = self._coerce_type(category_type)
        if icon is not UNSET:
            category.icon = icon or None
        updated = self._category_repo.update(category)
        logger.debug("Category updated: %s", category_id)
        return updated

    def delete_category(self, user_id: Optional[str], category_id: str) -> None:
        """Delete a category. Owner only; its transactions become uncategorized."""
        category = self._category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        self._access.require_owner(user_id, category.organization_id)
        self._category_repo.delete(category_id)
        logger.debug("Category deleted: %s", category_id)

    @staticmethod
    def _coerce_type(value: Union[TransactionType, str]) -> TransactionType:
        try:
            return TransactionType(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid category type: {value}") from exc
