"""Dining table model."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bondpos.db.base import Base, RecordMixin


class TableStatus(str, Enum):
    """Known table states. The status column itself is free text."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    CLEANING = "cleaning"


class DiningTable(Base, RecordMixin):
    """Restaurant table for seating."""

    __tablename__ = "dining_tables"

    table_number: Mapped[str] = mapped_column(String(50), nullable=False)
    capacity: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default=TableStatus.AVAILABLE.value, nullable=False)
