"""Pydantic schemas for the organization summary endpoint."""

from pydantic import BaseModel

from fintrack.api.schemas.transaction import TransactionResponse


class SummaryResponse(BaseModel):
    """Dashboard totals, all amounts in cents."""

    model_config = {"from_attributes": True}

    organization_id: str
    total_balance: int
    total_income: int
    total_expenses: int
    accounts_count: int
    categories_count: int
    transactions_count: int
    recent_transactions: list[TransactionResponse]
