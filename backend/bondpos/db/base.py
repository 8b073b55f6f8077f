"""SQLAlchemy declarative base and common columns."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

from bondpos.core import clock


def new_id() -> str:
    return str(uuid.uuid4())


class BusinessDateTime(TypeDecorator):
    """Timestamp stored as wall time in the business timezone.

    SQLite keeps no UTC offset, so values are converted to the business
    timezone on the way in and come back timezone-aware.
    """

    impl = DateTime
    cache_ok = True

    @property
    def python_type(self):
        return datetime

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return clock.localize(value).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        return clock.localize(value)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class RecordMixin:
    """Public string ID plus an integer surrogate key.

    Lists are ordered by ``pk``, which follows insertion order.
    """

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(36), unique=True, index=True, nullable=False, default=new_id)


class TimestampMixin:
    """Server-side creation time."""

    created_at: Mapped[datetime] = mapped_column(BusinessDateTime, default=clock.now, nullable=False)
