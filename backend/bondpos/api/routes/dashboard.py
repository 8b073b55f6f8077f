"""Dashboard routes.

Every endpoint takes ``filter`` (today, yesterday, this-week, custom, all)
and, for ``custom``, a ``date`` in YYYY-MM-DD form.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, Request

from bondpos.core.rate_limit import READ_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.schemas.dashboard import (
    CategorySalesResponse,
    DashboardStatsResponse,
    PaymentMethodSalesResponse,
    PopularProductResponse,
)
from bondpos.schemas.order import OrderResponse
from bondpos.services.dashboard_service import DashboardService, resolve_window

router = APIRouter()

FilterParam = Query("today", description="today, yesterday, this-week, custom or all")
DateParam = Query(None, description="Day for the custom filter (YYYY-MM-DD)")


@router.get("/stats", response_model=DashboardStatsResponse)
@limiter.limit(READ_LIMIT)
def get_dashboard_stats(
    request: Request,
    store: StoreDep,
    filter: str = FilterParam,
    date: Optional[str] = DateParam,
):
    """Headline sales, revenue, expense and purchase figures."""
    return DashboardService(store).stats(resolve_window(filter, date))


@router.get("/sales-by-category", response_model=List[CategorySalesResponse])
@limiter.limit(READ_LIMIT)
def get_sales_by_category(
    request: Request,
    store: StoreDep,
    filter: str = FilterParam,
    date: Optional[str] = DateParam,
):
    return DashboardService(store).sales_by_category(resolve_window(filter, date))


@router.get("/sales-by-payment-method", response_model=List[PaymentMethodSalesResponse])
@limiter.limit(READ_LIMIT)
def get_sales_by_payment_method(
    request: Request,
    store: StoreDep,
    filter: str = FilterParam,
    date: Optional[str] = DateParam,
):
    return DashboardService(store).sales_by_payment_method(resolve_window(filter, date))


@router.get("/popular-products", response_model=List[PopularProductResponse])
@limiter.limit(READ_LIMIT)
def get_popular_products(
    request: Request,
    store: StoreDep,
    filter: str = FilterParam,
    date: Optional[str] = DateParam,
):
    """Top five products by quantity sold."""
    return DashboardService(store).popular_products(resolve_window(filter, date))


@router.get("/recent-orders", response_model=List[OrderResponse])
@limiter.limit(READ_LIMIT)
def get_recent_orders(
    request: Request,
    store: StoreDep,
    filter: str = FilterParam,
    date: Optional[str] = DateParam,
):
    """Latest ten completed orders in the window."""
    return DashboardService(store).recent_orders(resolve_window(filter, date))
