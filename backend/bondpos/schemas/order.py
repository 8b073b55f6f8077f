"""Order schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from bondpos.models import DiningOption, DiscountType, OrderSource, OrderStatus, PaymentStatus
from bondpos.schemas.base import CamelModel
from bondpos.schemas.catalog import ProductResponse


class OrderItemCreate(CamelModel):
    """Order line as sent by the till or the QR menu.

    ``total`` is accepted for compatibility and recomputed server-side.
    """

    product_id: str
    quantity: int = Field(..., ge=1)
    price: Decimal = Field(..., ge=0)
    total: Optional[Decimal] = None


class OrderItemResponse(CamelModel):
    id: str
    order_id: str
    product_id: str
    quantity: int
    price: Decimal
    total: Decimal


class OrderItemWithProductResponse(OrderItemResponse):
    """Order line joined with its product."""

    product: ProductResponse

    @classmethod
    def from_joined(cls, joined) -> "OrderItemWithProductResponse":
        item = joined.item
        return cls(
            id=item.id,
            order_id=item.order_id,
            product_id=item.product_id,
            quantity=item.quantity,
            price=item.price,
            total=item.total,
            product=ProductResponse.model_validate(joined.product),
        )


class OrderBase(CamelModel):
    """Base order schema."""

    table_id: Optional[str] = None
    dining_option: DiningOption = DiningOption.DINE_IN
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    order_source: OrderSource = OrderSource.POS
    discount: Decimal = Field(default=Decimal("0"), ge=0)
    discount_type: DiscountType = DiscountType.AMOUNT
    status: OrderStatus = OrderStatus.DRAFT
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: Optional[str] = None


class OrderCreate(OrderBase):
    """Order creation schema.

    ``subtotal`` is only used when no items are given; ``total`` is always
    recomputed.
    """

    subtotal: Optional[Decimal] = Field(default=None, ge=0)
    total: Optional[Decimal] = None
    items: List[OrderItemCreate] = Field(default_factory=list)


class OrderUpdate(CamelModel):
    """Order update schema."""

    table_id: Optional[str] = None
    dining_option: Optional[DiningOption] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    order_source: Optional[OrderSource] = None
    subtotal: Optional[Decimal] = Field(default=None, ge=0)
    discount: Optional[Decimal] = Field(default=None, ge=0)
    discount_type: Optional[DiscountType] = None
    total: Optional[Decimal] = None
    status: Optional[OrderStatus] = None
    payment_status: Optional[PaymentStatus] = None
    payment_method: Optional[str] = None


class OrderStatusUpdate(CamelModel):
    status: Optional[OrderStatus] = None


class OrderResponse(OrderBase):
    """Order response schema."""

    id: str
    order_number: str
    subtotal: Decimal
    total: Decimal
    dining_option: str
    order_source: str
    discount_type: str
    status: str
    payment_status: str
    created_at: datetime
    completed_at: Optional[datetime] = None


class OrderWithItemsResponse(OrderResponse):
    items: List[OrderItemWithProductResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result) -> "OrderWithItemsResponse":
        base = OrderResponse.model_validate(result.order)
        return cls(
            **base.model_dump(),
            items=[OrderItemWithProductResponse.from_joined(joined) for joined in result.items],
        )
