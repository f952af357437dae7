"""
Unit tests for AccountService.

Tests cover:
- Account creation with zero balance
- Listing and fetching within an organization
- Updates that never touch the balance
- Owner-only deletion cascading to transactions
"""

import pytest

from fintrack.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from fintrack.domain.models import AccountType, TransactionType
from fintrack.services import AccountService

from tests.conftest import MEMBER_ID, OUTSIDER_ID, OWNER_ID


class TestCreateAccount:
    """Tests for create_account."""

    def test_starts_at_zero(self, account_service: AccountService, organization):
        account = account_service.create_account(
            MEMBER_ID, organization.organization_id, "Wallet", "cash"
        )

        assert account.balance == 0
        assert account.account_type == AccountType.CASH
        assert account.organization_id == organization.organization_id

    def test_invalid_type(self, account_service: AccountService, organization):
        with pytest.raises(ValidationError) as exc_info:
            account_service.create_account(
                MEMBER_ID, organization.organization_id, "Wallet", "savings"
            )

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_short_name(self, account_service: AccountService, organization):
        with pytest.raises(ValidationError):
            account_service.create_account(MEMBER_ID, organization.organization_id, "W")

    def test_outsider_rejected(self, account_service: AccountService, organization):
        with pytest.raises(AuthorizationError):
            account_service.create_account(OUTSIDER_ID, organization.organization_id, "Wallet")


class TestReadAccounts:
    """Tests for get_account and list_accounts."""

    def test_list_is_scoped_and_sorted(
        self,
        account_service: AccountService,
        account_factory,
        organization,
        other_organization,
    ):
        account_factory(name="Savings")
        account_factory(name="Checking")
        account_service.create_account(OUTSIDER_ID, other_organization.organization_id, "Theirs")

        names = [a.name for a in account_service.list_accounts(MEMBER_ID, organization.organization_id)]

        assert names == ["Checking", "Savings"]

    def test_get_missing(self, account_service: AccountService):
        with pytest.raises(NotFoundError):
            account_service.get_account(MEMBER_ID, "missing")

    def test_get_foreign(self, account_service: AccountService, sample_account):
        with pytest.raises(AuthorizationError):
            account_service.get_account(OUTSIDER_ID, sample_account.account_id)


class TestUpdateAccount:
    """Tests for update_account."""

    def test_update_keeps_balance(
        self,
        account_service: AccountService,
        transaction_factory,
        sample_account,
    ):
        """
        GIVEN an account with a balance of 1234
        WHEN a member renames and retypes it
        THEN the balance is unchanged
        """
        transaction_factory(sample_account.account_id, 1234)

        updated = account_service.update_account(
            MEMBER_ID, sample_account.account_id, name="Main", account_type=AccountType.CREDIT
        )

        assert updated.name == "Main"
        assert updated.account_type == AccountType.CREDIT
        assert updated.balance == 1234

    def test_partial_update(self, account_service: AccountService, sample_account):
        updated = account_service.update_account(MEMBER_ID, sample_account.account_id, name="Main")

        assert updated.account_type == AccountType.BANK


class TestDeleteAccount:
    """Tests for delete_account."""

    def test_owner_deletes_with_transactions(
        self,
        account_service: AccountService,
        transaction_factory,
        sample_account,
        transaction_repo,
        organization,
    ):
        transaction_factory(sample_account.account_id, 100)
        transaction_factory(sample_account.account_id, 50, TransactionType.EXPENSE)

        account_service.delete_account(OWNER_ID, sample_account.account_id)

        with pytest.raises(NotFoundError):
            account_service.get_account(OWNER_ID, sample_account.account_id)
        assert transaction_repo.count(organization.organization_id) == 0

    def test_member_cannot_delete(self, account_service: AccountService, sample_account):
        with pytest.raises(AuthorizationError):
            account_service.delete_account(MEMBER_ID, sample_account.account_id)

        assert account_service.get_account(MEMBER_ID, sample_account.account_id)

    def test_delete_missing(self, account_service: AccountService):
        with pytest.raises(NotFoundError):
            account_service.delete_account(OWNER_ID, "missing")
