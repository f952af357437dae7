"""Transaction repository protocol."""

from datetime import date
from typing import Protocol, Optional

from fintrack.domain.models import Transaction, TransactionStatus


class TransactionRepository(Protocol):
    """Interface for transaction data access."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        ...

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        ...

    def update(
        self,
        transaction: Transaction,
        expected: Optional[Transaction] = None,
    ) -> Transaction:
        """
        Update an existing transaction.

        With ``expected``, the write only applies while the stored account,
        amount and status still match it; otherwise ConflictError is raised.
        """
        ...

    def delete(self, transaction_id: str) -> None:
        """Delete a transaction row."""
        ...

    def query(
        self,
        organization_id: str,
        account_ids: Optional[list[str]] = None,
        statuses: Optional[list[TransactionStatus]] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """Query transactions with filters, newest first."""
        ...

    def count(self, organization_id: str) -> int:
        """Count transactions of an organization."""
        ...

    def sum_paid_amounts(self, account_id: str) -> int:
        """Signed sum of paid transaction amounts on an account."""
        ...
