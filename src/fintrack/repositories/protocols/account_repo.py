"""Account repository protocol."""

from typing import Protocol, Optional

from fintrack.domain.models import Account


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        ...

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account by ID."""
        ...

    def list_by_organization(self, organization_id: str) -> list[Account]:
        """List accounts of an organization, ordered by name."""
        ...

    def update(self, account: Account) -> Account:
        """Update name and type of an existing account. Balance is not written."""
        ...

    def delete(self, account_id: str) -> None:
        """Delete an account together with its transactions."""
        ...

    def adjust_balance(self, account_id: str, delta: int) -> None:
        """Atomically add ``delta`` to the stored balance."""
        ...

    def set_balance(self, account_id: str, balance: int) -> None:
        """Overwrite the stored balance (reconciliation only)."""
        ...
