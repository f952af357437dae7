"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from fintrack.domain.models.enums import TransactionStatus, TransactionType

# Largest accepted magnitude, in cents
MAX_AMOUNT_CENTS = 999_999_999_999


def signed_amount(amount: int, txn_type: TransactionType) -> int:
    """
    Return ``amount`` signed by direction.

    The caller's sign is ignored: income is always positive, expense always
    negative.
    """
    magnitude = abs(amount)
    return magnitude if txn_type == TransactionType.INCOME else -magnitude


@dataclass
class Transaction:
    """
    Income or expense entry against an account.

    ``amount`` is stored signed in cents (+ income, - expense).
    """

    transaction_id: str
    organization_id: str
    account_id: str
    amount: int
    txn_date: date
    txn_type: TransactionType
    status: TransactionStatus = TransactionStatus.PAID
    category_id: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = field(default=None)
    updated_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str):
            self.txn_type = TransactionType(self.txn_type)
        if isinstance(self.status, str):
            self.status = TransactionStatus(self.status)

    @property
    def is_paid(self) -> bool:
        return self.status == TransactionStatus.PAID

    @property
    def balance_contribution(self) -> int:
        """Amount this transaction currently adds to its account balance."""
        return self.amount if self.is_paid else 0
