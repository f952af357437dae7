"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fintrack.config.settings import get_settings
from fintrack.config.logging_config import setup_logging
from fintrack.repositories.sqlalchemy.database import init_db
from fintrack.api.routers import (
    organizations_router,
    accounts_router,
    categories_router,
    transactions_router,
)
from fintrack.core.exceptions import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

# Most specific first: AuthenticationError subclasses AuthorizationError
ERROR_STATUS_CODES: list[tuple[type[AppError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (PersistenceError, 500),
]


def status_code_for(exc: AppError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 400


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant personal finance: accounts, categories and transactions",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(organizations_router)
app.include_router(accounts_router)
app.include_router(categories_router)
app.include_router(transactions_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=status_code_for(exc),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
