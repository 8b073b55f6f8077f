"""API routes."""

from fastapi import APIRouter

from bondpos.api.routes import (
    attendance,
    categories,
    dashboard,
    employees,
    expense_categories,
    expenses,
    leaves,
    orders,
    payroll,
    products,
    purchases,
    sales,
    settings,
    staff_salaries,
    tables,
)

api_router = APIRouter()

# Catalogue and floor
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(tables.router, prefix="/tables", tags=["tables"])

# Orders and reporting
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(sales.router, prefix="/sales", tags=["orders", "reports"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard", "reports"])

# Expenses and purchasing
api_router.include_router(expense_categories.router, prefix="/expense-categories", tags=["expenses"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(purchases.router, prefix="/purchases", tags=["purchases"])

# HR
api_router.include_router(employees.router, prefix="/employees", tags=["staff"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["staff"])
api_router.include_router(leaves.router, prefix="/leaves", tags=["staff"])
api_router.include_router(payroll.router, prefix="/payroll", tags=["staff", "payroll"])
api_router.include_router(staff_salaries.router, prefix="/staff-salaries", tags=["staff", "payroll"])

api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
