"""Category and product schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from bondpos.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    """Category creation schema."""

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=100)


class CategoryResponse(CategoryCreate):
    id: str


class ProductBase(CamelModel):
    """Base product schema."""

    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., ge=0)
    purchase_cost: Optional[Decimal] = Field(default=None, ge=0)
    category_id: str
    image_url: Optional[str] = None
    unit: str = "piece"
    description: Optional[str] = None
    quantity: Decimal = Decimal("0")


class ProductCreate(ProductBase):
    """Product creation schema."""

    pass


class ProductUpdate(CamelModel):
    """Product update schema."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    price: Optional[Decimal] = Field(default=None, ge=0)
    purchase_cost: Optional[Decimal] = Field(default=None, ge=0)
    category_id: Optional[str] = None
    image_url: Optional[str] = None
    unit: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[Decimal] = None


class ProductResponse(ProductBase):
    """Product response schema."""

    id: str
    created_at: datetime
