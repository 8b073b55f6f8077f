"""Order models: orders, order lines and the order-number counter."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from bondpos.db.base import Base, BusinessDateTime, RecordMixin, TimestampMixin


class OrderStatus(str, Enum):
    DRAFT = "draft"
    QR_PENDING = "qr-pending"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


class DiscountType(str, Enum):
    AMOUNT = "amount"
    PERCENTAGE = "percentage"


class DiningOption(str, Enum):
    DINE_IN = "dine-in"
    TAKEAWAY = "takeaway"
    DELIVERY = "delivery"


class OrderSource(str, Enum):
    POS = "pos"
    QR = "qr"


class Order(Base, RecordMixin, TimestampMixin):
    """Till, draft or QR-menu order."""

    __tablename__ = "orders"

    order_number: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    table_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    dining_option: Mapped[str] = mapped_column(String(20), default=DiningOption.DINE_IN.value, nullable=False)
    customer_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    customer_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    order_source: Mapped[str] = mapped_column(String(10), default=OrderSource.POS.value, nullable=False)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    discount_type: Mapped[str] = mapped_column(String(20), default=DiscountType.AMOUNT.value, nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default=OrderStatus.DRAFT.value, nullable=False, index=True)
    payment_status: Mapped[str] = mapped_column(
        String(20), default=PaymentStatus.PENDING.value, nullable=False
    )
    payment_method: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(BusinessDateTime, nullable=True)


class OrderItem(Base, RecordMixin):
    """Order line."""

    __tablename__ = "order_items"

    order_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    # Not checked against the catalogue; unknown products drop out of joined views
    product_id: Mapped[str] = mapped_column(String(36), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    # Unit price snapshot taken when the order was placed
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)


class Counter(Base):
    """Named counter row. Increments commit and roll back with the caller's session."""

    __tablename__ = "counters"

    name: Mapped[str] = mapped_column(String(50), primary_key=True)
    next_value: Mapped[int] = mapped_column(Integer, nullable=False)
