"""Order routes: till orders, drafts and the QR-menu queue."""

from typing import List

from fastapi import APIRouter, HTTPException, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.order import (
    OrderCreate,
    OrderItemWithProductResponse,
    OrderResponse,
    OrderStatusUpdate,
    OrderUpdate,
    OrderWithItemsResponse,
)
from bondpos.services.order_service import OrderService

router = APIRouter()


@router.get("", response_model=List[OrderResponse])
@limiter.limit(READ_LIMIT)
def list_orders(request: Request, store: StoreDep):
    """List every order regardless of status."""
    return store.orders.list()


@router.get("/drafts", response_model=List[OrderWithItemsResponse])
@limiter.limit(READ_LIMIT)
def list_draft_orders(request: Request, store: StoreDep):
    """Orders saved at the till before payment, with their items."""
    return [OrderWithItemsResponse.from_result(result) for result in OrderService(store).draft_orders()]


@router.get("/qr", response_model=List[OrderWithItemsResponse])
@limiter.limit(READ_LIMIT)
def list_qr_orders(request: Request, store: StoreDep):
    """QR-menu orders waiting for staff to accept or reject them, with their items."""
    return [OrderWithItemsResponse.from_result(result) for result in OrderService(store).qr_queue()]


@router.get("/{order_id}", response_model=OrderWithItemsResponse)
@limiter.limit(READ_LIMIT)
def get_order(request: Request, order_id: str, store: StoreDep):
    """Get an order with its items joined to products."""
    result = OrderService(store).get_order_with_items(order_id)
    return OrderWithItemsResponse.from_result(result)


@router.get("/{order_id}/items", response_model=List[OrderItemWithProductResponse])
@limiter.limit(READ_LIMIT)
def list_order_items(request: Request, order_id: str, store: StoreDep):
    items = OrderService(store).list_items(order_id)
    return [OrderItemWithProductResponse.from_joined(joined) for joined in items]


@router.post("", response_model=OrderWithItemsResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_order(request: Request, data: OrderCreate, store: StoreDep):
    """Place an order with its items.

    Line totals, the subtotal and the total are computed server-side. A
    referenced table is marked occupied.
    """
    result = OrderService(store).create_order(
        data.model_dump(exclude={"items"}, exclude_none=True),
        [item.model_dump() for item in data.items],
    )
    return OrderWithItemsResponse.from_result(result)


@router.patch("/{order_id}", response_model=OrderResponse)
@limiter.limit(WRITE_LIMIT)
def update_order(request: Request, order_id: str, data: OrderUpdate, store: StoreDep):
    return OrderService(store).update_order(order_id, data.changes())


@router.patch("/{order_id}/status", response_model=OrderResponse)
@limiter.limit(WRITE_LIMIT)
def update_order_status(request: Request, order_id: str, data: OrderStatusUpdate, store: StoreDep):
    """Move an order to a new status. Illegal transitions are rejected."""
    if data.status is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Status is required")
    return OrderService(store).update_status(order_id, data.status)


@router.patch("/{order_id}/accept", response_model=OrderResponse)
@limiter.limit(WRITE_LIMIT)
def accept_qr_order(request: Request, order_id: str, store: StoreDep):
    return OrderService(store).accept_qr_order(order_id)


@router.patch("/{order_id}/reject", response_model=OrderResponse)
@limiter.limit(WRITE_LIMIT)
def reject_qr_order(request: Request, order_id: str, store: StoreDep):
    return OrderService(store).reject_qr_order(order_id)


@router.delete("/{order_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_order(request: Request, order_id: str, store: StoreDep):
    """Delete an order and its items. The table is not released."""
    OrderService(store).delete_order(order_id)
    return {"success": True}
