"""Product category routes."""

from typing import List

from fastapi import APIRouter, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Category
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.catalog import CategoryCreate, CategoryResponse, CategoryUpdate

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
@limiter.limit(READ_LIMIT)
def list_categories(request: Request, store: StoreDep):
    """List all product categories."""
    return store.categories.list()


@router.get("/{category_id}", response_model=CategoryResponse)
@limiter.limit(READ_LIMIT)
def get_category(request: Request, category_id: str, store: StoreDep):
    return store.categories.require(category_id)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_category(request: Request, data: CategoryCreate, store: StoreDep):
    return store.categories.add(Category(**data.model_dump()))


@router.patch("/{category_id}", response_model=CategoryResponse)
@limiter.limit(WRITE_LIMIT)
def update_category(request: Request, category_id: str, data: CategoryUpdate, store: StoreDep):
    return store.categories.patch(category_id, **data.changes())


@router.delete("/{category_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_category(request: Request, category_id: str, store: StoreDep):
    """Delete a category. Products that reference it keep the dangling ID."""
    store.categories.remove(category_id)
    return {"success": True}
