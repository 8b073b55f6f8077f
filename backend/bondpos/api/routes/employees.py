"""Employee routes."""

from typing import List

from fastapi import APIRouter, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Employee
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.staff import EmployeeCreate, EmployeeResponse, EmployeeUpdate

router = APIRouter()


@router.get("", response_model=List[EmployeeResponse])
@limiter.limit(READ_LIMIT)
def list_employees(request: Request, store: StoreDep):
    """List all employees."""
    return store.employees.list()


@router.get("/{employee_id}", response_model=EmployeeResponse)
@limiter.limit(READ_LIMIT)
def get_employee(request: Request, employee_id: str, store: StoreDep):
    return store.employees.require(employee_id)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_employee(request: Request, data: EmployeeCreate, store: StoreDep):
    return store.employees.add(Employee(**data.model_dump()))


@router.patch("/{employee_id}", response_model=EmployeeResponse)
@limiter.limit(WRITE_LIMIT)
def update_employee(request: Request, employee_id: str, data: EmployeeUpdate, store: StoreDep):
    return store.employees.patch(employee_id, **data.changes())


@router.delete("/{employee_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_employee(request: Request, employee_id: str, store: StoreDep):
    """Delete an employee. Their attendance, leave and pay records are kept."""
    store.employees.remove(employee_id)
    return {"success": True}
