"""Database models."""

from bondpos.models.catalog import Category, Product
from bondpos.models.table import DiningTable, TableStatus
from bondpos.models.order import (
    Counter,
    DiningOption,
    DiscountType,
    Order,
    OrderItem,
    OrderSource,
    OrderStatus,
    PaymentStatus,
)
from bondpos.models.expense import Expense, ExpenseCategory, Purchase
from bondpos.models.staff import Attendance, Employee, Leave, Payroll, StaffSalary
from bondpos.models.settings import BusinessSettings

__all__ = [
    "Category",
    "Product",
    "DiningTable",
    "TableStatus",
    "Counter",
    "DiningOption",
    "DiscountType",
    "Order",
    "OrderItem",
    "OrderSource",
    "OrderStatus",
    "PaymentStatus",
    "Expense",
    "ExpenseCategory",
    "Purchase",
    "Attendance",
    "Employee",
    "Leave",
    "Payroll",
    "StaffSalary",
    "BusinessSettings",
]
