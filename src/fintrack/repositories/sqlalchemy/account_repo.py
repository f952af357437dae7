"""SQLAlchemy implementation of AccountRepository."""

from typing import Optional

from sqlalchemy import update

from fintrack.core.exceptions import NotFoundError
from fintrack.core.timezone import now_utc
from fintrack.domain.models import Account
from fintrack.repositories.sqlalchemy.base import SqlAlchemyRepository
from fintrack.repositories.sqlalchemy.orm_models import AccountORM, TransactionORM


class SqlAlchemyAccountRepository(SqlAlchemyRepository):
    """SQLAlchemy-backed account repository."""

    def create(self, account: Account) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            account_id=account.account_id,
            organization_id=account.organization_id,
            name=account.name,
            account_type=account.account_type,
            balance=account.balance,
            created_at=account.created_at or now_utc(),
        )
        with self._write("create account"):
            self._db.add(orm_account)
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Retrieve account by ID."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.account_id == account_id
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def list_by_organization(self, organization_id: str) -> list[Account]:
        """List accounts of an organization, ordered by name."""
        orm_accounts = (
            self._db.query(AccountORM)
            .filter(AccountORM.organization_id == organization_id)
            .order_by(AccountORM.name)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def update(self, account: Account) -> Account:
        """Update name and type of an existing account."""
        orm_account = self._db.query(AccountORM).filter(
            AccountORM.account_id == account.account_id
        ).first()
        if not orm_account:
            raise NotFoundError("Account", account.account_id)
        with self._write("update account"):
            orm_account.name = account.name
            orm_account.account_type = account.account_type
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def delete(self, account_id: str) -> None:
        """Delete an account together with its transactions."""
        with self._write("delete account"):
            self._db.query(TransactionORM).filter(
                TransactionORM.account_id == account_id
            ).delete(synchronize_session=False)
            self._db.query(AccountORM).filter(
                AccountORM.account_id == account_id
            ).delete(synchronize_session=False)

    def adjust_balance(self, account_id: str, delta: int) -> None:
        """
        Atomically add ``delta`` to the stored balance.

        Issued as a single relative UPDATE so concurrent writers never
        overwrite each other's contribution.
        """
        with self._write("adjust account balance"):
            result = self._db.execute(
                update(AccountORM)
                .where(AccountORM.account_id == account_id)
                .values(balance=AccountORM.balance + delta)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Account", account_id)
        self._db.expire_all()

    def set_balance(self, account_id: str, balance: int) -> None:
        """Overwrite the stored balance."""
        with self._write("set account balance"):
            result = self._db.execute(
                update(AccountORM)
                .where(AccountORM.account_id == account_id)
                .values(balance=balance)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Account", account_id)
        self._db.expire_all()

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            account_id=orm.account_id,
            organization_id=orm.organization_id,
            name=orm.name,
            account_type=orm.account_type,
            balance=int(orm.balance or 0),
            created_at=orm.created_at,
        )
