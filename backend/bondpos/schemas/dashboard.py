"""Dashboard aggregation schemas."""

from __future__ import annotations

from bondpos.schemas.base import CamelModel


class DashboardStatsResponse(CamelModel):
    today_sales: float
    today_orders: int
    total_revenue: float
    total_orders: int
    total_expenses: float
    profit_loss: float
    total_purchase: float


class CategorySalesResponse(CamelModel):
    category: str
    revenue: float


class PaymentMethodSalesResponse(CamelModel):
    payment_method: str
    amount: float


class PopularProductResponse(CamelModel):
    product: str
    quantity: int
    revenue: float
