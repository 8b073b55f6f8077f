"""Dining table routes."""

import logging
from typing import List

from fastapi import APIRouter, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import DiningTable
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.table import TableCreate, TableResponse, TableStatusUpdate, TableUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[TableResponse])
@limiter.limit(READ_LIMIT)
def list_tables(request: Request, store: StoreDep):
    return store.tables.list()


@router.get("/{table_id}", response_model=TableResponse)
@limiter.limit(READ_LIMIT)
def get_table(request: Request, table_id: str, store: StoreDep):
    return store.tables.require(table_id)


@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_table(request: Request, data: TableCreate, store: StoreDep):
    return store.tables.add(DiningTable(**data.model_dump()))


@router.patch("/{table_id}", response_model=TableResponse)
@limiter.limit(WRITE_LIMIT)
def update_table(request: Request, table_id: str, data: TableUpdate, store: StoreDep):
    return store.tables.patch(table_id, **data.changes())


@router.patch("/{table_id}/status", response_model=TableResponse)
@limiter.limit(WRITE_LIMIT)
def update_table_status(request: Request, table_id: str, data: TableStatusUpdate, store: StoreDep):
    """Set a table's status, e.g. release it back to available after service."""
    table = store.tables.patch(table_id, status=data.status)
    logger.info(f"Table {table.table_number} status set to {table.status}")
    return table


@router.delete("/{table_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_table(request: Request, table_id: str, store: StoreDep):
    store.tables.remove(table_id)
    return {"success": True}
