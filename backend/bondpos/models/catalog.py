"""Product catalogue models."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bondpos.db.base import Base, RecordMixin, TimestampMixin


class Category(Base, RecordMixin):
    """Menu category."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), nullable=False)


class Product(Base, RecordMixin, TimestampMixin):
    """Product on the menu."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    purchase_cost: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    # Plain reference; deleting a category leaves it dangling
    category_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    unit: Mapped[str] = mapped_column(String(20), default="piece", nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # On-hand stock. Sales do not decrement it.
    quantity: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
