"""Core utilities and shared functionality."""

from fintrack.core.timezone import (
    app_timezone,
    now_utc,
    today_local,
    parse_txn_date,
)
from fintrack.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    AuthorizationError,
    AuthenticationError,
    ConflictError,
    PersistenceError,
)

__all__ = [
    "app_timezone",
    "now_utc",
    "today_local",
    "parse_txn_date",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "AuthorizationError",
    "AuthenticationError",
    "ConflictError",
    "PersistenceError",
]
