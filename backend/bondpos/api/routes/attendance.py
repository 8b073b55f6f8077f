"""Attendance routes."""

from datetime import date as date_type
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Attendance
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.staff import AttendanceCreate, AttendanceResponse, AttendanceUpdate

router = APIRouter()


@router.get("", response_model=List[AttendanceResponse])
@limiter.limit(READ_LIMIT)
def list_attendance(
    request: Request,
    store: StoreDep,
    date: Optional[str] = Query(None, description="Calendar day (YYYY-MM-DD)"),
    employee_id: Optional[str] = Query(None, alias="employeeId"),
):
    """List attendance, by calendar day or by employee."""
    if date:
        try:
            day = date_type.fromisoformat(date[:10])
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid date, expected YYYY-MM-DD",
            )
        records = store.attendance_on(day)
        if employee_id:
            records = [a for a in records if a.employee_id == employee_id]
        return records
    if employee_id:
        return store.attendance_for_employee(employee_id)
    return store.attendance.list()


@router.post("", response_model=AttendanceResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_attendance(request: Request, data: AttendanceCreate, store: StoreDep):
    return store.attendance.add(Attendance(**data.model_dump()))


@router.patch("/{attendance_id}", response_model=AttendanceResponse)
@limiter.limit(WRITE_LIMIT)
def update_attendance(request: Request, attendance_id: str, data: AttendanceUpdate, store: StoreDep):
    return store.attendance.patch(attendance_id, **data.changes())


@router.delete("/{attendance_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_attendance(request: Request, attendance_id: str, store: StoreDep):
    store.attendance.remove(attendance_id)
    return {"success": True}
