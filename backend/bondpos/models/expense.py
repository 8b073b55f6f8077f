"""Expense and purchase models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bondpos.db.base import Base, BusinessDateTime, RecordMixin, TimestampMixin


class ExpenseCategory(Base, RecordMixin):
    __tablename__ = "expense_categories"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Expense(Base, RecordMixin, TimestampMixin):
    __tablename__ = "expenses"

    expense_date: Mapped[datetime] = mapped_column(BusinessDateTime, nullable=False, index=True)
    category_id: Mapped[str] = mapped_column(String(36), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    unit: Mapped[str] = mapped_column(String(20), nullable=False)
    quantity: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)


class Purchase(Base, RecordMixin, TimestampMixin):
    """Stock bought in, referencing a product category."""

    __tablename__ = "purchases"

    image_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    category_id: Mapped[str] = mapped_column(String(36), nullable=False)
    item_name: Mapped[str] = mapped_column(String(200), nullable=False)
    quantity: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    unit: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    purchase_date: Mapped[datetime] = mapped_column(BusinessDateTime, nullable=False, index=True)

    @property
    def cost(self) -> Decimal:
        return self.price * self.quantity
