"""Business-timezone clock helpers."""

from datetime import datetime
from typing import Optional

from bondpos.core.config import settings


def now() -> datetime:
    """Current time in the configured business timezone."""
    return datetime.now(settings.tzinfo)


def localize(value: Optional[datetime]) -> Optional[datetime]:
    """Attach the business timezone to naive datetimes, convert aware ones."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=settings.tzinfo)
    return value.astimezone(settings.tzinfo)
