"""Dashboard Service.

Read-only statistics over completed orders, purchases and expenses for a
named date window. Everything is recomputed from the store on each call.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union

from bondpos.core import clock
from bondpos.core.config import settings
from bondpos.db.store import Store
from bondpos.models import Order

logger = logging.getLogger(__name__)

NO_PAYMENT_METHOD = "Not specified"
POPULAR_PRODUCTS_LIMIT = 5
RECENT_ORDERS_LIMIT = 10


class DateFilter(str, Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "this-week"
    CUSTOM = "custom"
    ALL = "all"


@dataclass(frozen=True)
class DateWindow:
    """Inclusive ``[start, end]`` range in the business timezone."""

    start: datetime
    end: datetime

    def contains(self, moment: Optional[datetime]) -> bool:
        if moment is None:
            return False
        return self.start <= clock.localize(moment) <= self.end


def _day_window(day: date) -> DateWindow:
    tz = settings.tzinfo
    return DateWindow(
        start=datetime.combine(day, time.min, tzinfo=tz),
        end=datetime.combine(day, time.max, tzinfo=tz),
    )


def _parse_day(value: Union[str, date, None]) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def resolve_window(
    filter: Optional[str] = DateFilter.TODAY.value,
    date: Union[str, date, None] = None,
    now: Optional[datetime] = None,
) -> DateWindow:
    """Turn a named filter into a date window.

    Unknown filters fall back to today, as does ``custom`` when the date is
    missing or unparseable.
    """
    now = clock.localize(now) if now is not None else clock.now()
    today = now.date()

    if filter == DateFilter.YESTERDAY.value:
        return _day_window(today - timedelta(days=1))
    if filter == DateFilter.THIS_WEEK.value:
        # Weeks start on Sunday
        sunday = today - timedelta(days=(today.weekday() + 1) % 7)
        return DateWindow(start=_day_window(sunday).start, end=_day_window(today).end)
    if filter == DateFilter.CUSTOM.value:
        return _day_window(_parse_day(date) or today)
    if filter == DateFilter.ALL.value:
        tz = settings.tzinfo
        return DateWindow(
            start=datetime(2000, 1, 1, tzinfo=tz),
            end=datetime(2099, 12, 31, 23, 59, 59, 999999, tzinfo=tz),
        )
    return _day_window(today)


@dataclass(frozen=True)
class DashboardStats:
    today_sales: float
    today_orders: int
    total_revenue: float
    total_orders: int
    total_expenses: float
    profit_loss: float
    total_purchase: float


@dataclass(frozen=True)
class CategorySales:
    category: str
    revenue: float


@dataclass(frozen=True)
class PaymentMethodSales:
    payment_method: str
    amount: float


@dataclass(frozen=True)
class ProductPopularity:
    product: str
    quantity: int
    revenue: float


class DashboardService:
    """Aggregations behind the dashboard and report pages."""

    def __init__(self, store: Store):
        self.store = store

    def _completed_in(self, window: DateWindow) -> List[Order]:
        return [order for order in self.store.completed_orders() if window.contains(order.created_at)]

    def stats(self, window: DateWindow) -> DashboardStats:
        """Headline figures for the window.

        ``total_orders`` counts every completed order ever placed and is not
        limited to the window, unlike ``today_orders``. Revenue subtracts the
        stored ``discount`` field of each order, so a percentage discount
        counts as its rate rather than the amount it took off.
        """
        all_completed = self.store.completed_orders()
        in_window = [order for order in all_completed if window.contains(order.created_at)]

        sales = sum((order.total for order in in_window), Decimal(0))
        discounts = sum((order.discount for order in in_window), Decimal(0))
        purchase_cost = sum(
            (p.cost for p in self.store.purchases.list() if window.contains(p.purchase_date)),
            Decimal(0),
        )
        expenses = sum(
            (e.total for e in self.store.expenses.list() if window.contains(e.expense_date)),
            Decimal(0),
        )
        revenue = sales - (purchase_cost + discounts)

        return DashboardStats(
            today_sales=float(sales),
            today_orders=len(in_window),
            total_revenue=float(revenue),
            total_orders=len(all_completed),
            total_expenses=float(expenses),
            profit_loss=float(revenue - expenses),
            total_purchase=float(purchase_cost),
        )

    def sales_by_category(self, window: DateWindow) -> List[CategorySales]:
        revenue: Dict[str, Decimal] = OrderedDict()
        for order in self._completed_in(window):
            for item in self.store.items_for_order(order.id):
                product = self.store.products.get(item.product_id)
                if product is None:
                    continue
                category = self.store.categories.get(product.category_id)
                if category is None:
                    continue
                revenue[category.name] = revenue.get(category.name, Decimal(0)) + item.total

        rows = [CategorySales(category=name, revenue=float(total)) for name, total in revenue.items()]
        return sorted(rows, key=lambda row: row.revenue, reverse=True)

    def sales_by_payment_method(self, window: DateWindow) -> List[PaymentMethodSales]:
        totals: Dict[str, Decimal] = OrderedDict()
        for order in self._completed_in(window):
            method = order.payment_method or NO_PAYMENT_METHOD
            totals[method] = totals.get(method, Decimal(0)) + order.total

        rows = [PaymentMethodSales(payment_method=method, amount=float(amount)) for method, amount in totals.items()]
        return sorted(rows, key=lambda row: row.amount, reverse=True)

    def popular_products(self, window: DateWindow) -> List[ProductPopularity]:
        """Top products by quantity sold. Ties keep first-seen order."""
        stats: Dict[str, list] = OrderedDict()
        for order in self._completed_in(window):
            for item in self.store.items_for_order(order.id):
                product = self.store.products.get(item.product_id)
                if product is None:
                    continue
                entry = stats.setdefault(product.id, [product.name, 0, Decimal(0)])
                entry[1] += item.quantity
                entry[2] += item.total

        rows = [
            ProductPopularity(product=name, quantity=quantity, revenue=float(revenue))
            for name, quantity, revenue in stats.values()
        ]
        rows.sort(key=lambda row: row.quantity, reverse=True)
        return rows[:POPULAR_PRODUCTS_LIMIT]

    def recent_orders(self, window: DateWindow) -> List[Order]:
        orders = sorted(
            self._completed_in(window),
            key=lambda order: clock.localize(order.created_at),
            reverse=True,
        )
        return orders[:RECENT_ORDERS_LIMIT]
