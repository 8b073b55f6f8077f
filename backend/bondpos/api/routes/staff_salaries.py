"""Staff salary payment routes."""

from typing import List

from fastapi import APIRouter, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import StaffSalary
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.staff import StaffSalaryCreate, StaffSalaryResponse, StaffSalaryUpdate

router = APIRouter()


@router.get("", response_model=List[StaffSalaryResponse])
@limiter.limit(READ_LIMIT)
def list_staff_salaries(request: Request, store: StoreDep):
    return store.staff_salaries.list()


@router.get("/{salary_id}", response_model=StaffSalaryResponse)
@limiter.limit(READ_LIMIT)
def get_staff_salary(request: Request, salary_id: str, store: StoreDep):
    return store.staff_salaries.require(salary_id)


@router.post("", response_model=StaffSalaryResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_staff_salary(request: Request, data: StaffSalaryCreate, store: StoreDep):
    return store.staff_salaries.add(StaffSalary(**data.model_dump()))


@router.patch("/{salary_id}", response_model=StaffSalaryResponse)
@limiter.limit(WRITE_LIMIT)
def update_staff_salary(request: Request, salary_id: str, data: StaffSalaryUpdate, store: StoreDep):
    return store.staff_salaries.patch(salary_id, **data.changes())


@router.delete("/{salary_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_staff_salary(request: Request, salary_id: str, store: StoreDep):
    store.staff_salaries.remove(salary_id)
    return {"success": True}
