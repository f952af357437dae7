"""View models for service outputs."""

from dataclasses import dataclass, field

from fintrack.domain.models import Transaction


@dataclass
class ReconcileResult:
    """Outcome of recomputing an account balance from its paid transactions."""

    account_id: str
    previous_balance: int
    computed_balance: int

    @property
    def drift(self) -> int:
        """Cached minus computed; zero when the cache was consistent."""
        return self.previous_balance - self.computed_balance

    @property
    def corrected(self) -> bool:
        return self.drift != 0


@dataclass
class OrganizationSummary:
    """Dashboard totals for one organization."""

    organization_id: str
    total_balance: int = 0
    total_income: int = 0
    total_expenses: int = 0
    accounts_count: int = 0
    categories_count: int = 0
    transactions_count: int = 0
    recent_transactions: list[Transaction] = field(default_factory=list)
