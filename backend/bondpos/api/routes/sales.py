"""Sales history routes."""

from typing import List

from fastapi import APIRouter, Request

from bondpos.core.rate_limit import READ_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.schemas.order import OrderResponse

router = APIRouter()


@router.get("", response_model=List[OrderResponse])
@limiter.limit(READ_LIMIT)
def list_sales(request: Request, store: StoreDep):
    """Completed orders."""
    return store.completed_orders()
