"""Category domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from fintrack.domain.models.enums import TransactionType


@dataclass
class Category:
    """Label for grouping income or expense transactions."""

    category_id: str
    organization_id: str
    name: str
    category_type: TransactionType
    icon: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.category_type, str):
            self.category_type = TransactionType(self.category_type)
