"""Business settings routes."""

import logging

from fastapi import APIRouter, Request

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.schemas.settings import SettingsResponse, SettingsUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=SettingsResponse)
@limiter.limit(READ_LIMIT)
def get_settings(request: Request, store: StoreDep):
    """Get the business settings, creating the defaults on first read."""
    return store.get_settings()


@router.put("", response_model=SettingsResponse)
@limiter.limit(WRITE_LIMIT)
def update_settings(request: Request, data: SettingsUpdate, store: StoreDep):
    """Merge the given fields into the settings."""
    changes = data.changes()
    updated = store.update_settings(**changes)
    logger.info(f"Business settings updated: {', '.join(sorted(changes)) or 'no fields'}")
    return updated
