"""SQLAlchemy implementation of TransactionRepository."""

from datetime import date
from typing import Optional

from sqlalchemy import and_, func, update

from fintrack.core.exceptions import ConflictError, NotFoundError
from fintrack.core.timezone import now_utc
from fintrack.domain.models import Transaction, TransactionStatus
from fintrack.repositories.sqlalchemy.base import SqlAlchemyRepository
from fintrack.repositories.sqlalchemy.orm_models import TransactionORM


class SqlAlchemyTransactionRepository(SqlAlchemyRepository):
    """SQLAlchemy-backed transaction repository."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        orm_txn = self._to_orm(transaction)
        with self._write("create transaction"):
            self._db.add(orm_txn)
        self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.transaction_id == transaction_id
        ).first()
        return self._to_domain(orm_txn) if orm_txn else None

    def update(
        self,
        transaction: Transaction,
        expected: Optional[Transaction] = None,
    ) -> Transaction:
        """
        Update an existing transaction.

        When ``expected`` is given the UPDATE only matches while the stored
        account, amount and status still equal it. A miss raises ConflictError.
        """
        conditions = [TransactionORM.transaction_id == transaction.transaction_id]
        if expected is not None:
            conditions.extend([
                TransactionORM.account_id == expected.account_id,
                TransactionORM.amount == expected.amount,
                TransactionORM.status == expected.status,
            ])

        with self._write("update transaction"):
            result = self._db.execute(
                update(TransactionORM)
                .where(and_(*conditions))
                .values(
                    account_id=transaction.account_id,
                    category_id=transaction.category_id,
                    amount=transaction.amount,
                    txn_date=transaction.txn_date,
                    txn_type=transaction.txn_type,
                    status=transaction.status,
                    description=transaction.description,
                    updated_at=transaction.updated_at,
                )
                .execution_options(synchronize_session=False)
            )
            matched = result.rowcount
        self._db.expire_all()

        stored = self.get_by_id(transaction.transaction_id)
        if stored is None:
            raise NotFoundError("Transaction", transaction.transaction_id)
        if matched == 0:
            raise ConflictError(
                f"Transaction {transaction.transaction_id} was changed by another request"
            )
        return stored

    def delete(self, transaction_id: str) -> None:
        """Delete a transaction row."""
        with self._write("delete transaction"):
            deleted = self._db.query(TransactionORM).filter(
                TransactionORM.transaction_id == transaction_id
            ).delete(synchronize_session=False)
            if deleted == 0:
                raise NotFoundError("Transaction", transaction_id)
        self._db.expire_all()

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
        conditions = [TransactionORM.organization_id == organization_id]
        if account_ids:
            conditions.append(TransactionORM.account_id.in_(account_ids))
        if statuses:
            conditions.append(TransactionORM.status.in_(statuses))
        if start_date:
            conditions.append(TransactionORM.txn_date >= start_date)
        if end_date:
            conditions.append(TransactionORM.txn_date <= end_date)

        query = (
            self._db.query(TransactionORM)
            .filter(and_(*conditions))
            .order_by(TransactionORM.txn_date.desc(), TransactionORM.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(t) for t in query.all()]

    def count(self, organization_id: str) -> int:
        """Count transactions of an organization."""
        return (
            self._db.query(func.count(TransactionORM.transaction_id))
            .filter(TransactionORM.organization_id == organization_id)
            .scalar()
        ) or 0

    def sum_paid_amounts(self, account_id: str) -> int:
        """Signed sum of paid transaction amounts on an account."""
        total = (
            self._db.query(func.coalesce(func.sum(TransactionORM.amount), 0))
            .filter(
                TransactionORM.account_id == account_id,
                TransactionORM.status == TransactionStatus.PAID,
            )
            .scalar()
        )
        return int(total or 0)

    def _to_orm(self, txn: Transaction) -> TransactionORM:
        """Convert domain model to ORM model."""
        return TransactionORM(
            transaction_id=txn.transaction_id,
            organization_id=txn.organization_id,
            account_id=txn.account_id,
            category_id=txn.category_id,
            amount=txn.amount,
            txn_date=txn.txn_date,
            txn_type=txn.txn_type,
            status=txn.status,
            description=txn.description,
            created_at=txn.created_at or now_utc(),
            updated_at=txn.updated_at,
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            transaction_id=orm.transaction_id,
            organization_id=orm.organization_id,
            account_id=orm.account_id,
            category_id=orm.category_id,
            amount=int(orm.amount),
            txn_date=orm.txn_date,
            txn_type=orm.txn_type,
            status=orm.status,
            description=orm.description,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
