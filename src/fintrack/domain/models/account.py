"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from fintrack.domain.models.enums import AccountType


@dataclass
class Account:
    """
    Money container owned by an organization.

    ``balance`` is a cached aggregate in cents: the signed sum of all paid
    transactions on the account. It is maintained by the balance ledger and
    never set directly by callers.
    """

    account_id: str
    organization_id: str
    name: str
    account_type: AccountType = AccountType.BANK
    balance: int = 0
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.account_type, str):
            self.account_type = AccountType(self.account_type)
