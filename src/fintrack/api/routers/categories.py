"""Category endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from fintrack.api.deps import get_category_service, get_current_user_id
from fintrack.api.schemas import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryListResponse,
)
from fintrack.domain.models.enums import TransactionType
from fintrack.services import CategoryService, UNSET

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    data: CategoryCreate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = service.create_category(
        user_id,
        organization_id=data.organization_id,
        name=data.name,
        category_type=data.category_type,
        icon=data.icon,
    )
    return CategoryResponse.model_validate(category)


@router.get("", response_model=CategoryListResponse)
def list_categories(
    organization_id: str = Query(..., description="Organization ID"),
    category_type: Optional[TransactionType] = Query(None),
    user_id: Optional[str] = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryListResponse:
    categories = service.list_categories(user_id, organization_id, category_type)
    return CategoryListResponse(
        categories=[CategoryResponse.model_validate(c) for c in categories],
        count=len(categories),
    )


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    return CategoryResponse.model_validate(service.get_category(user_id, category_id))


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    data: CategoryUpdate,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = service.update_category(
        user_id,
        category_id,
        name=data.name,
        category_type=data.category_type,
        icon=data.icon if "icon" in data.model_fields_set else UNSET,
    )
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: str,
    user_id: Optional[str] = Depends(get_current_user_id),
    service: CategoryService = Depends(get_category_service),
) -> Response:
    """Delete a category (owner only)."""
    service.delete_category(user_id, category_id)
    return Response(status_code=204)
