"""Organization dashboard totals."""

from typing import Optional

from fintrack.domain.models import TransactionStatus, TransactionType
from fintrack.domain.views import OrganizationSummary
from fintrack.repositories.protocols import (
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)
from fintrack.services.access import OrganizationAccess

RECENT_TRANSACTIONS_LIMIT = 5


class SummaryService:
    """Computes the figures shown on an organization's dashboard."""

    def __init__(
        self,
        access: OrganizationAccess,
        account_repo: AccountRepository,
        category_repo: CategoryRepository,
        transaction_repo: TransactionRepository,
    ):
        self._access = access
        self._account_repo = account_repo
        self._category_repo = category_repo
        self._transaction_repo = transaction_repo

    def get_summary(self, user_id: Optional[str], organization_id: str) -> OrganizationSummary:
        """
        Build the dashboard summary.

        Balance comes from the cached account balances; income and expense
        totals come from paid transactions. Expenses are reported as a
        positive number.
        """
        self._access.require_member(user_id, organization_id)

        accounts = self._account_repo.list_by_organization(organization_id)
        categories = self._category_repo.list_by_organization(organization_id)
        paid = self._transaction_repo.query(
            organization_id=organization_id,
            statuses=[TransactionStatus.PAID],
        )

        income = sum(t.amount for t in paid if t.txn_type == TransactionType.INCOME)
        expenses = sum(t.amount for t in paid if t.txn_type == TransactionType.EXPENSE)

        return OrganizationSummary(
            organization_id=organization_id,
            total_balance=sum(a.balance for a in accounts),
            total_income=income,
            total_expenses=abs(expenses),
            accounts_count=len(accounts),
            categories_count=len(categories),
            transactions_count=self._transaction_repo.count(organization_id),
            recent_transactions=self._transaction_repo.query(
                organization_id=organization_id,
                limit=RECENT_TRANSACTIONS_LIMIT,
            ),
        )
