"""Expense, expense category and purchase schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from bondpos.schemas.base import CamelModel


class ExpenseCategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class ExpenseCategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None


class ExpenseCategoryResponse(ExpenseCategoryCreate):
    id: str


class ExpenseCreate(CamelModel):
    """Expense entry. ``total`` is taken as sent (amount x quantity on the client)."""

    expense_date: datetime
    category_id: str
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0)
    unit: str
    quantity: Decimal = Field(..., ge=0)
    total: Decimal = Field(..., ge=0)


class ExpenseUpdate(CamelModel):
    expense_date: Optional[datetime] = None
    category_id: Optional[str] = None
    description: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    unit: Optional[str] = None
    quantity: Optional[Decimal] = Field(default=None, ge=0)
    total: Optional[Decimal] = Field(default=None, ge=0)


class ExpenseResponse(ExpenseCreate):
    id: str
    created_at: datetime


class PurchaseCreate(CamelModel):
    """Stock purchase schema."""

    image_url: Optional[str] = None
    category_id: str
    item_name: str = Field(..., min_length=1)
    quantity: Decimal = Field(..., ge=0)
    unit: str
    price: Decimal = Field(..., ge=0)
    purchase_date: datetime


class PurchaseUpdate(CamelModel):
    image_url: Optional[str] = None
    category_id: Optional[str] = None
    item_name: Optional[str] = Field(default=None, min_length=1)
    quantity: Optional[Decimal] = Field(default=None, ge=0)
    unit: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    purchase_date: Optional[datetime] = None


class PurchaseResponse(PurchaseCreate):
    id: str
    created_at: datetime
