"""HR models: employees, attendance, leave and pay."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bondpos.db.base import Base, BusinessDateTime, RecordMixin, TimestampMixin


class Employee(Base, RecordMixin, TimestampMixin):
    __tablename__ = "employees"

    # Human-facing staff code such as EMP001
    employee_id: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    department: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    joining_date: Mapped[datetime] = mapped_column(BusinessDateTime, nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    photo_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="active", nullable=False)


class Attendance(Base, RecordMixin, TimestampMixin):
    __tablename__ = "attendance"

    employee_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(BusinessDateTime, nullable=False, index=True)
    check_in: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    check_out: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)


class Leave(Base, RecordMixin, TimestampMixin):
    __tablename__ = "leaves"

    employee_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    leave_type: Mapped[str] = mapped_column(String(50), nullable=False)
    start_date: Mapped[datetime] = mapped_column(BusinessDateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(BusinessDateTime, nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)


class Payroll(Base, RecordMixin, TimestampMixin):
    __tablename__ = "payroll"

    employee_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    month: Mapped[str] = mapped_column(String(20), nullable=False)
    year: Mapped[str] = mapped_column(String(4), nullable=False)
    base_salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    bonus: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    deductions: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    net_salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False)


class StaffSalary(Base, RecordMixin, TimestampMixin):
    __tablename__ = "staff_salaries"

    employee_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    salary_date: Mapped[datetime] = mapped_column(BusinessDateTime, nullable=False)
    salary_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    deduct_salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    total_salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
