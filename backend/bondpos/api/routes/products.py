"""Product routes."""

from typing import List, Optional

from fastapi import APIRouter, Query, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Product
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.catalog import ProductCreate, ProductResponse, ProductUpdate

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
@limiter.limit(READ_LIMIT)
def list_products(
    request: Request,
    store: StoreDep,
    category_id: Optional[str] = Query(None, alias="categoryId", description="Filter by category"),
):
    """List products, optionally for one category."""
    if category_id:
        return store.products_by_category(category_id)
    return store.products.list()


@router.get("/{product_id}", response_model=ProductResponse)
@limiter.limit(READ_LIMIT)
def get_product(request: Request, product_id: str, store: StoreDep):
    """Get a specific product."""
    return store.products.require(product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_product(request: Request, data: ProductCreate, store: StoreDep):
    """Create a new product."""
    return store.products.add(Product(**data.model_dump()))


@router.patch("/{product_id}", response_model=ProductResponse)
@limiter.limit(WRITE_LIMIT)
def update_product(request: Request, product_id: str, data: ProductUpdate, store: StoreDep):
    """Update a product."""
    return store.products.patch(product_id, **data.changes())


@router.delete("/{product_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_product(request: Request, product_id: str, store: StoreDep):
    store.products.remove(product_id)
    return {"success": True}
