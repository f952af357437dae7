"""Balance ledger: transaction CRUD that keeps account balances consistent."""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Optional, Union

from fintrack.core.timezone import now_utc, today_local, parse_txn_date
from fintrack.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from fintrack.domain.models import (
    Account,
    Category,
    MAX_AMOUNT_CENTS,
    Transaction,
    TransactionStatus,
    TransactionType,
    signed_amount,
)
from fintrack.domain.views import ReconcileResult
from fintrack.repositories.protocols import (
    AccountRepository,
    CategoryRepository,
    TransactionRepository,
)
from fintrack.services.access import OrganizationAccess

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 500
MAX_AMEND_ATTEMPTS = 3


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# Marks a TransactionUpdate field as "leave unchanged"; None means "clear".
UNSET: Any = _Unset()


@dataclass
class TransactionCreate:
    """Input data for recording a transaction."""

    organization_id: str
    account_id: str
    amount: int
    txn_type: Union[TransactionType, str]
    status: Union[TransactionStatus, str] = TransactionStatus.PAID
    txn_date: Optional[Union[date, str]] = None
    category_id: Optional[str] = None
    description: Optional[str] = None


@dataclass
class TransactionUpdate:
    """
    Partial update for an existing transaction.

    Fields left as UNSET are not touched. ``category_id`` and ``description``
    may be set to None to clear them.
    """

    account_id: Any = UNSET
    category_id: Any = UNSET
    amount: Any = UNSET
    txn_date: Any = UNSET
    description: Any = UNSET
    txn_type: Any = UNSET
    status: Any = UNSET


class BalanceLedgerPolicy:
    """
    Records, amends and removes transactions while maintaining each
    account's cached balance.

    Invariant: ``account.balance == sum(t.amount for paid t on account)``.

    The transaction row write is the operation's outcome; failures there
    raise PersistenceError. The follow-up balance write is best-effort: a
    failure is logged and the operation still succeeds. ``reconcile_account``
    repairs any drift left behind.
    """

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

    def record_transaction(self, user_id: Optional[str], data: TransactionCreate) -> Transaction:
        """
        Record a new transaction.

        The stored amount is re-signed from ``txn_type``. When the transaction
        is created as paid its amount is folded into the account balance.
        """
        txn_type = self._coerce_type(data.txn_type)
        status = self._coerce_status(data.status)
        magnitude = self._validate_amount(data.amount)
        txn_date = self._coerce_date(data.txn_date) if data.txn_date is not None else today_local()
        description = self._validate_description(data.description)

        self._access.require_member(user_id, data.organization_id)
        self._require_account(data.account_id, data.organization_id)
        if data.category_id:
            self._require_category(data.category_id, data.organization_id)

        now = now_utc()
        transaction = Transaction(
            transaction_id=str(uuid.uuid4()),
            organization_id=data.organization_id,
            account_id=data.account_id,
            amount=signed_amount(magnitude, txn_type),
            txn_date=txn_date,
            txn_type=txn_type,
            status=status,
            category_id=data.category_id or None,
            description=description,
            created_at=now,
        )
        created = self._transaction_repo.create(transaction)

        if created.is_paid:
            self._apply_delta(created.account_id, created.amount, created.transaction_id)

        logger.debug("Transaction recorded: %s", created.transaction_id)
        return created

    def amend_transaction(
        self,
        user_id: Optional[str],
        transaction_id: str,
        patch: TransactionUpdate,
    ) -> Transaction:
        """
        Apply a partial update and compensate the affected balances.

        The old contribution (amount if paid, else 0) is reverted and the new
        one applied. When the account changes, the old account loses the old
        contribution and the new account gains the new one.

        The row write is conditional on the snapshot the delta was computed
        from. If another request changed the transaction in between, the
        patch is re-applied to a fresh read, up to MAX_AMEND_ATTEMPTS times.
        """
        for attempt in range(1, MAX_AMEND_ATTEMPTS + 1):
            current = self._transaction_repo.get_by_id(transaction_id)
            if not current:
                raise NotFoundError("Transaction", transaction_id)
            self._access.require_member(user_id, current.organization_id)

            amended = self._apply_patch(current, patch)
            try:
                updated = self._transaction_repo.update(amended, expected=current)
            except ConflictError:
                logger.info(
                    "Transaction %s changed concurrently (attempt %d)", transaction_id, attempt
                )
                continue

            self._rebalance(current, updated)
            logger.debug("Transaction amended: %s", transaction_id)
            return updated

        raise ConflictError(
            f"Transaction {transaction_id} kept changing; amend was not applied"
        )

    def _apply_patch(self, current: Transaction, patch: TransactionUpdate) -> Transaction:
        """Return a copy of ``current`` with the validated patch applied."""
        amended = replace(current)

        if patch.txn_type is not UNSET:
            amended.txn_type = self._coerce_type(patch.txn_type)
        if patch.status is not UNSET:
            amended.status = self._coerce_status(patch.status)
        if patch.txn_date is not UNSET:
            amended.txn_date = self._coerce_date(patch.txn_date)
        if patch.description is not UNSET:
            amended.description = self._validate_description(patch.description)

        magnitude = abs(current.amount)
        if patch.amount is not UNSET:
            magnitude = self._validate_amount(patch.amount)
        amended.amount = signed_amount(magnitude, amended.txn_type)

        if patch.account_id is not UNSET and patch.account_id != current.account_id:
            if not patch.account_id:
                raise ValidationError("account_id cannot be empty")
            self._require_account(patch.account_id, current.organization_id)
            amended.account_id = patch.account_id
        if patch.category_id is not UNSET and patch.category_id != current.category_id:
            if patch.category_id:
                self._require_category(patch.category_id, current.organization_id)
            amended.category_id = patch.category_id or None

        amended.updated_at = now_utc()
        return amended

    def remove_transaction(self, user_id: Optional[str], transaction_id: str) -> None:
        """
        Delete a transaction and revert its contribution if it was paid.

        Membership is enough; the owner role is not required. The row is
        deleted first, so a second removal of the same id fails with
        NotFoundError and never reverts the balance twice.
        """
        transaction = self._transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)
        self._access.require_member(user_id, transaction.organization_id)

        self._transaction_repo.delete(transaction_id)

        if transaction.is_paid:
            self._apply_delta(transaction.account_id, -transaction.amount, transaction_id)

        logger.debug("Transaction removed: %s", transaction_id)

    def reconcile_account(self, user_id: Optional[str], account_id: str) -> ReconcileResult:
        """Recompute an account balance from its paid transactions and fix drift."""
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        self._access.require_member(user_id, account.organization_id)

        result = ReconcileResult(
            account_id=account_id,
            previous_balance=account.balance,
            computed_balance=self._transaction_repo.sum_paid_amounts(account_id),
        )
        if result.corrected:
            logger.warning(
                "Balance drift on account %s: cached=%d computed=%d",
                account_id,
                result.previous_balance,
                result.computed_balance,
            )
            self._account_repo.set_balance(account_id, result.computed_balance)
        return result

    def get_transaction(self, user_id: Optional[str], transaction_id: str) -> Transaction:
        """Get a transaction the caller can see."""
        transaction = self._transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)
        self._access.require_member(user_id, transaction.organization_id)
        return transaction

    def list_transactions(
        self,
        user_id: Optional[str],
        organization_id: str,
        account_id: Optional[str] = None,
        status: Optional[TransactionStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List an organization's transactions, newest first."""
        self._access.require_member(user_id, organization_id)
        return self._transaction_repo.query(
            organization_id=organization_id,
            account_ids=[account_id] if account_id else None,
            statuses=[status] if status else None,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
        )

    def _rebalance(self, before: Transaction, after: Transaction) -> None:
        old = before.balance_contribution
        new = after.balance_contribution
        if before.account_id == after.account_id:
            self._apply_delta(after.account_id, new - old, after.transaction_id)
        else:
            self._apply_delta(before.account_id, -old, after.transaction_id)
            self._apply_delta(after.account_id, new, after.transaction_id)

    def _apply_delta(self, account_id: str, delta: int, transaction_id: str) -> bool:
        """Best-effort balance write. Returns False if it failed."""
        if delta == 0:
            return True
        try:
            self._account_repo.adjust_balance(account_id, delta)
        except (PersistenceError, NotFoundError):
            logger.error(
                "Failed to adjust balance of account %s by %d for transaction %s",
                account_id,
                delta,
                transaction_id,
                exc_info=True,
            )
            return False
        return True

    def _require_account(self, account_id: str, organization_id: str) -> Account:
        account = self._account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        if account.organization_id != organization_id:
            raise AuthorizationError("Account does not belong to this organization")
        return account

    def _require_category(self, category_id: str, organization_id: str) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category", category_id)
        if category.organization_id != organization_id:
            raise AuthorizationError("Category does not belong to this organization")
        return category

    @staticmethod
    def _validate_amount(amount: Any) -> int:
        """Return the magnitude of a valid amount in cents."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValidationError("Amount must be an integer number of cents")
        magnitude = abs(amount)
        if magnitude == 0:
            raise ValidationError("Amount must be non-zero")
        if magnitude > MAX_AMOUNT_CENTS:
            raise ValidationError("Amount is too large")
        return magnitude

    @staticmethod
    def _validate_description(description: Optional[str]) -> Optional[str]:
        if description is None:
            return None
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError("Description is too long")
        return description.strip() or None

    @staticmethod
    def _coerce_type(value: Any) -> TransactionType:
        try:
            return TransactionType(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid transaction type: {value}") from exc

    @staticmethod
    def _coerce_status(value: Any) -> TransactionStatus:
        try:
            return TransactionStatus(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid transaction status: {value}") from exc

    @staticmethod
    def _coerce_date(value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return parse_txn_date(value)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
