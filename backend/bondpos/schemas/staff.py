"""HR schemas: employees, attendance, leave, payroll and staff salaries."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from bondpos.schemas.base import CamelModel


# ==================== EMPLOYEES ====================

class EmployeeCreate(CamelModel):
    """Employee creation schema."""

    employee_id: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=200)
    position: str
    department: str
    email: Optional[str] = None
    phone: Optional[str] = None
    joining_date: datetime
    salary: Decimal = Field(..., ge=0)
    photo_url: Optional[str] = None
    status: str = "active"


class EmployeeUpdate(CamelModel):
    employee_id: Optional[str] = Field(default=None, min_length=1, max_length=20)
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    position: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    joining_date: Optional[datetime] = None
    salary: Optional[Decimal] = Field(default=None, ge=0)
    photo_url: Optional[str] = None
    status: Optional[str] = None


class EmployeeResponse(EmployeeCreate):
    id: str
    created_at: datetime


# ==================== ATTENDANCE ====================

class AttendanceCreate(CamelModel):
    employee_id: str
    date: datetime
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    status: str


class AttendanceUpdate(CamelModel):
    employee_id: Optional[str] = None
    date: Optional[datetime] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    status: Optional[str] = None


class AttendanceResponse(AttendanceCreate):
    id: str
    created_at: datetime


# ==================== LEAVES ====================

class LeaveCreate(CamelModel):
    employee_id: str
    leave_type: str
    start_date: datetime
    end_date: datetime
    reason: Optional[str] = None
    status: str = "pending"


class LeaveUpdate(CamelModel):
    employee_id: Optional[str] = None
    leave_type: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    reason: Optional[str] = None
    status: Optional[str] = None


class LeaveResponse(LeaveCreate):
    id: str
    created_at: datetime


# ==================== PAYROLL ====================

class PayrollCreate(CamelModel):
    employee_id: str
    month: str
    year: str
    base_salary: Decimal = Field(..., ge=0)
    bonus: Decimal = Decimal("0")
    deductions: Decimal = Decimal("0")
    net_salary: Decimal
    status: str = "pending"


class PayrollUpdate(CamelModel):
    employee_id: Optional[str] = None
    month: Optional[str] = None
    year: Optional[str] = None
    base_salary: Optional[Decimal] = Field(default=None, ge=0)
    bonus: Optional[Decimal] = None
    deductions: Optional[Decimal] = None
    net_salary: Optional[Decimal] = None
    status: Optional[str] = None


class PayrollResponse(PayrollCreate):
    id: str
    created_at: datetime


# ==================== STAFF SALARIES ====================

class StaffSalaryCreate(CamelModel):
    employee_id: str
    salary_date: datetime
    salary_amount: Decimal = Field(..., ge=0)
    deduct_salary: Decimal = Decimal("0")
    total_salary: Decimal


class StaffSalaryUpdate(CamelModel):
    employee_id: Optional[str] = None
    salary_date: Optional[datetime] = None
    salary_amount: Optional[Decimal] = Field(default=None, ge=0)
    deduct_salary: Optional[Decimal] = None
    total_salary: Optional[Decimal] = None


class StaffSalaryResponse(StaffSalaryCreate):
    id: str
    created_at: datetime
