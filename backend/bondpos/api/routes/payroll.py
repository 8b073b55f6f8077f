"""Payroll routes."""

from typing import List, Optional

from fastapi import APIRouter, Query, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Payroll
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.staff import PayrollCreate, PayrollResponse, PayrollUpdate

router = APIRouter()


@router.get("", response_model=List[PayrollResponse])
@limiter.limit(READ_LIMIT)
def list_payroll(
    request: Request,
    store: StoreDep,
    employee_id: Optional[str] = Query(None, alias="employeeId"),
):
    """List payroll runs, optionally for one employee."""
    if employee_id:
        return store.payroll_for_employee(employee_id)
    return store.payroll.list()


@router.get("/{payroll_id}", response_model=PayrollResponse)
@limiter.limit(READ_LIMIT)
def get_payroll(request: Request, payroll_id: str, store: StoreDep):
    return store.payroll.require(payroll_id)


@router.post("", response_model=PayrollResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_payroll(request: Request, data: PayrollCreate, store: StoreDep):
    return store.payroll.add(Payroll(**data.model_dump()))


@router.patch("/{payroll_id}", response_model=PayrollResponse)
@limiter.limit(WRITE_LIMIT)
def update_payroll(request: Request, payroll_id: str, data: PayrollUpdate, store: StoreDep):
    return store.payroll.patch(payroll_id, **data.changes())


@router.delete("/{payroll_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_payroll(request: Request, payroll_id: str, store: StoreDep):
    store.payroll.remove(payroll_id)
    return {"success": True}
