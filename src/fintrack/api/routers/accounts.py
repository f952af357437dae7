"""Account endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from fintrack.api.deps import get_account_service, get_balance_ledger, get_current_user_id
from fintrack.api.schemas import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountListResponse,
    ReconcileResponse,
)
from fintrack.services import AccountService, BalanceLedgerPolicy

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    data: AccountCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Create a new account with a zero balance."""
    account = service.create_account(
        user_id,
        organization_id=data.organization_id,
        name=data.name,
        account_type=data.account_type,
    )
    return AccountResponse.model_validate(account)


@router.get("", response_model=AccountListResponse)
def list_accounts(
    organization_id: str = Query(..., description="Organization ID"),
    user_id: Optional[str] = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountListResponse:
    """List accounts of an organization."""
    accounts = service.list_accounts(user_id, organization_id)
    return AccountListResponse(
        accounts=[AccountResponse.model_validate(a) for a in accounts],
        count=len(accounts),
    )


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Get a single account."""
    return AccountResponse.model_validate(service.get_account(user_id, account_id))


@router.patch("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    data: AccountUpdate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Rename or retype an account."""
    account = service.update_account(
        user_id,
        account_id,
        name=data.name,
        account_type=data.account_type,
    )
    return AccountResponse.model_validate(account)


@router.delete("/{account_id}", status_code=204)
def delete_account(
    account_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: AccountService = Depends(get_account_service),
) -> Response:
    """Delete an account and its transactions (owner only)."""
    service.delete_account(user_id, account_id)
    return Response(status_code=204)


@router.post("/{account_id}/reconcile", response_model=ReconcileResponse)
def reconcile_account(
    account_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    ledger: BalanceLedgerPolicy = Depends(get_balance_ledger),
) -> ReconcileResponse:
    """Recompute the account balance from its paid transactions."""
    result = ledger.reconcile_account(user_id, account_id)
    return ReconcileResponse(
        account_id=result.account_id,
        previous_balance=result.previous_balance,
        computed_balance=result.computed_balance,
        drift=result.drift,
        corrected=result.corrected,
    )
