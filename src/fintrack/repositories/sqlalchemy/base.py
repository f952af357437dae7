"""Shared plumbing for SQLAlchemy repositories."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fintrack.core.exceptions import AppError, PersistenceError

logger = logging.getLogger(__name__)


class SqlAlchemyRepository:
    """Base class holding the session and the commit/rollback discipline."""

    def __init__(self, db: Session):
        self._db = db

    @contextmanager
    def _write(self, action: str) -> Iterator[None]:
        """
        Run a block of writes and commit it.

        Database errors roll the session back and surface as PersistenceError.
        """
        try:
            yield
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.debug("Rolled back failed write: %s", action)
            raise PersistenceError(f"Failed to {action}: {exc}") from exc
        except AppError:
            self._db.rollback()
            raise
