"""Account management."""

import logging
import uuid
from typing import Optional, Union

from fintrack.core.timezone import now_utc
from fintrack.core.exceptions import NotFoundError, ValidationError
from fintrack.domain.models import Account, AccountType
from fintrack.repositories.protocols import AccountRepository
from fintrack.services.access import OrganizationAccess
from fintrack.services.validation import clean_name

logger = logging.getLogger(__name__)


class AccountService:
    """
    CRUD for accounts.

    Balances start at zero and are only ever moved by the balance ledger;
    nothing here writes them.
    """

    def __init__(
        self,
        access: OrganizationAccess,
        account_repo: AccountRepository,
    ):
        self._access = access
        self._account_repo = account_repo

    def create_account(
        self,
        user_id: Optional[str],
        organization_id: str,
        name: str,
        account_type: Union[AccountType, str] = AccountType.BANK,
    ) -> Account:
        """Create an account with a zero balance."""
        account = Account(
            account_id=str(uuid.uuid4()),
            organization_id=organization_id,
            name=clean_name(name, "Account"),
            account_type=self._coerce_type(account_type),
            balance=0,
            created_at=now_utc(),
        )
        self._access.require_member(user_id, organization_id)
        created = self._account_repo.create(account)
        logger.debug("Account created: %s", created.account_id)
        return created

    def get_account(self, user_id: Optional[str], account_id: str) -> Account:
        """Get account by ID."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        self._access.require_member(user_id, account.organization_id)
        return account

    def list_accounts(self, user_id: Optional[str], organization_id: str) -> list[Account]:
        """List accounts of an organization."""
        self._access.require_member(user_id, organization_id)
        return self._account_repo.list_by_organization(organization_id)

    def update_account(
        self,
        user_id: Optional[str],
        account_id: str,
        name: Optional[str] = None,
        account_type: Optional[Union[AccountType, str]] = None,
    ) -> Account:
        """Rename or retype an account."""
        account = self.get_account(user_id, account_id)
        if name is not None:
            account.name = clean_name(name, "Account")
        if account_type is not None:
            account.account_type = self._coerce_type(account_type)
        updated = self._account_repo.update(account)
        logger.debug("Account updated: %s", account_id)
        return updated

    def delete_account(self, user_id: Optional[str], account_id: str) -> None:
        """Delete an account and its transactions. Owner only."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        self._access.require_owner(user_id, account.organization_id)
        self._account_repo.delete(account_id)
        logger.debug("Account deleted: %s", account_id)

    @staticmethod
    def _coerce_type(value: Union[AccountType, str]) -> AccountType:
        try:
            return AccountType(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid account type: {value}") from exc
