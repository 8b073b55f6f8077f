"""Stock purchase routes."""

from typing import List

from fastapi import APIRouter, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Purchase
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.expense import PurchaseCreate, PurchaseResponse, PurchaseUpdate

router = APIRouter()


@router.get("", response_model=List[PurchaseResponse])
@limiter.limit(READ_LIMIT)
def list_purchases(request: Request, store: StoreDep):
    return store.purchases.list()


@router.get("/{purchase_id}", response_model=PurchaseResponse)
@limiter.limit(READ_LIMIT)
def get_purchase(request: Request, purchase_id: str, store: StoreDep):
    return store.purchases.require(purchase_id)


@router.post("", response_model=PurchaseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_purchase(request: Request, data: PurchaseCreate, store: StoreDep):
    return store.purchases.add(Purchase(**data.model_dump()))


@router.patch("/{purchase_id}", response_model=PurchaseResponse)
@limiter.limit(WRITE_LIMIT)
def update_purchase(request: Request, purchase_id: str, data: PurchaseUpdate, store: StoreDep):
    return store.purchases.patch(purchase_id, **data.changes())


@router.delete("/{purchase_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_purchase(request: Request, purchase_id: str, store: StoreDep):
    store.purchases.remove(purchase_id)
    return {"success": True}
