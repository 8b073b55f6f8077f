"""Dining table schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from bondpos.schemas.base import CamelModel


class TableCreate(CamelModel):
    table_number: str = Field(..., min_length=1, max_length=20)
    capacity: Optional[str] = None
    description: Optional[str] = None
    status: str = Field(default="available", min_length=1)


class TableUpdate(CamelModel):
    table_number: Optional[str] = Field(default=None, min_length=1, max_length=20)
    capacity: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = Field(default=None, min_length=1)


class TableStatusUpdate(CamelModel):
    """Free-text status; available, occupied, reserved and cleaning are the known values."""

    status: str = Field(..., min_length=1)


class TableResponse(TableCreate):
    id: str
