"""Transaction endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from fintrack.api.deps import get_balance_ledger, get_current_user_id
from fintrack.api.schemas import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
    TransactionListResponse,
)
from fintrack.domain.models.enums import TransactionStatus
from fintrack.services import BalanceLedgerPolicy, TransactionCreate, TransactionUpdate

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=TransactionResponse, status_code=201)
def record_transaction(
    data: TransactionCreateRequest,
    user_id: Optional[str] = Depends(get_current_user_id),
    ledger: BalanceLedgerPolicy = Depends(get_balance_ledger),
) -> TransactionResponse:
    """Record a transaction; paid transactions move the account balance."""
    transaction = ledger.record_transaction(
        user_id,
        TransactionCreate(
            organization_id=data.organization_id,
            account_id=data.account_id,
            amount=data.amount,
            txn_type=data.txn_type,
            status=data.status,
            txn_date=data.txn_date,
            category_id=data.category_id,
            description=data.description,
        ),
    )
    return TransactionResponse.model_validate(transaction)


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    organization_id: str = Query(..., description="Organization ID"),
    account_id: Optional[str] = Query(None),
    status: Optional[TransactionStatus] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=1000),
    user_id: Optional[str] = Depends(get_current_user_id),
    ledger: BalanceLedgerPolicy = Depends(get_balance_ledger),
) -> TransactionListResponse:
    """List transactions, newest first."""
    transactions = ledger.list_transactions(
        user_id,
        organization_id,
        account_id=account_id,
        status=status,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
    )
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        count=len(transactions),
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    ledger: BalanceLedgerPolicy = Depends(get_balance_ledger),
) -> TransactionResponse:
    return TransactionResponse.model_validate(ledger.get_transaction(user_id, transaction_id))


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def amend_transaction(
    transaction_id: str,
    data: TransactionUpdateRequest,
    user_id: Optional[str] = Depends(get_current_user_id),
    ledger: BalanceLedgerPolicy = Depends(get_balance_ledger),
) -> TransactionResponse:
    """Amend a transaction; balances are compensated for the change."""
    patch = TransactionUpdate(
        **{field: getattr(data, field) for field in data.model_fields_set}
    )
    transaction = ledger.amend_transaction(user_id, transaction_id, patch)
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=204)
def remove_transaction(
    transaction_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    ledger: BalanceLedgerPolicy = Depends(get_balance_ledger),
) -> Response:
    """Delete a transaction, reverting its balance contribution if paid."""
    ledger.remove_transaction(user_id, transaction_id)
    return Response(status_code=204)
