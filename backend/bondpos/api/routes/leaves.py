"""Leave request routes."""

from typing import List, Optional

from fastapi import APIRouter, Query, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Leave
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.staff import LeaveCreate, LeaveResponse, LeaveUpdate

router = APIRouter()


@router.get("", response_model=List[LeaveResponse])
@limiter.limit(READ_LIMIT)
def list_leaves(
    request: Request,
    store: StoreDep,
    employee_id: Optional[str] = Query(None, alias="employeeId"),
):
    if employee_id:
        return store.leaves_for_employee(employee_id)
    return store.leaves.list()


@router.get("/{leave_id}", response_model=LeaveResponse)
@limiter.limit(READ_LIMIT)
def get_leave(request: Request, leave_id: str, store: StoreDep):
    return store.leaves.require(leave_id)


@router.post("", response_model=LeaveResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_leave(request: Request, data: LeaveCreate, store: StoreDep):
    return store.leaves.add(Leave(**data.model_dump()))


@router.patch("/{leave_id}", response_model=LeaveResponse)
@limiter.limit(WRITE_LIMIT)
def update_leave(request: Request, leave_id: str, data: LeaveUpdate, store: StoreDep):
    """Update a leave request, e.g. approve or reject it."""
    return store.leaves.patch(leave_id, **data.changes())


@router.delete("/{leave_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_leave(request: Request, leave_id: str, store: StoreDep):
    store.leaves.remove(leave_id)
    return {"success": True}
