"""Tests for date windows and dashboard aggregations."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from bondpos.models import Category, Order, OrderItem, Product
from bondpos.services.dashboard_service import DashboardService, resolve_window
from bondpos.services.order_service import OrderService

# Wednesday
NOW = datetime(2025, 10, 8, 15, 30, tzinfo=timezone.utc)


def _day(value: date):
    return resolve_window("custom", value.isoformat(), now=NOW)


# ============== Date windows ==============

class TestResolveWindow:
    """Named filters to inclusive windows."""

    def test_today(self):
        window = resolve_window("today", now=NOW)
        assert window.start == datetime(2025, 10, 8, tzinfo=timezone.utc)
        assert window.end == datetime(2025, 10, 8, 23, 59, 59, 999999, tzinfo=timezone.utc)

    def test_yesterday(self):
        window = resolve_window("yesterday", now=NOW)
        assert window.start.date() == date(2025, 10, 7)
        assert window.end == datetime(2025, 10, 7, 23, 59, 59, 999999, tzinfo=timezone.utc)

    def test_this_week_starts_sunday(self):
        window = resolve_window("this-week", now=NOW)
        assert window.start == datetime(2025, 10, 5, tzinfo=timezone.utc)
        assert window.end.date() == date(2025, 10, 8)

    def test_this_week_on_sunday(self):
        sunday = datetime(2025, 10, 5, 9, 0, tzinfo=timezone.utc)
        window = resolve_window("this-week", now=sunday)
        assert window.start.date() == date(2025, 10, 5)

    def test_custom(self):
        window = resolve_window("custom", "2025-10-06", now=NOW)
        assert window.start.date() == date(2025, 10, 6)
        assert window.end.date() == date(2025, 10, 6)

    @pytest.mark.parametrize("value", [None, "", "not-a-date"])
    def test_custom_without_valid_date_is_today(self, value):
        assert resolve_window("custom", value, now=NOW) == resolve_window("today", now=NOW)

    def test_all(self):
        window = resolve_window("all", now=NOW)
        assert window.start.year == 2000
        assert window.end.year == 2099

    def test_unknown_filter_is_today(self):
        assert resolve_window("last-decade", now=NOW) == resolve_window("today", now=NOW)

    def test_bounds_are_inclusive(self):
        window = resolve_window("today", now=NOW)
        assert window.contains(window.start)
        assert window.contains(window.end)
        assert not window.contains(window.end + timedelta(microseconds=1))

    def test_naive_timestamps_use_business_timezone(self):
        window = resolve_window("today", now=NOW)
        assert window.contains(datetime(2025, 10, 8, 0, 0))


# ============== Aggregations on the demo data ==============

class TestDashboardStatsSeeded:
    """dashboard stats over the demo data set."""

    def test_sales_day(self, seeded_store):
        stats = DashboardService(seeded_store).stats(_day(date(2025, 10, 6)))
        assert stats.today_sales == pytest.approx(157.75)
        assert stats.today_orders == 4
        # 157.75 - (purchase 250.00 + discounts 17.00)
        assert stats.total_revenue == pytest.approx(-109.25)
        assert stats.total_purchase == pytest.approx(250.00)
        assert stats.total_expenses == pytest.approx(250.00)
        assert stats.profit_loss == pytest.approx(-359.25)
        assert stats.total_orders == 4

    def test_total_orders_ignores_window(self, seeded_store):
        stats = DashboardService(seeded_store).stats(_day(date(2025, 10, 5)))
        assert stats.today_sales == 0
        assert stats.today_orders == 0
        assert stats.total_orders == 4
        assert stats.total_purchase == pytest.approx(255.00)
        assert stats.total_expenses == pytest.approx(450.00)

    def test_confirmed_order_not_a_sale(self, seeded_store):
        # sale-4 is confirmed, not completed
        stats = DashboardService(seeded_store).stats(resolve_window("all", now=NOW))
        assert stats.today_orders == 4

    def test_sales_by_payment_method(self, seeded_store):
        rows = DashboardService(seeded_store).sales_by_payment_method(_day(date(2025, 10, 6)))
        assert [(r.payment_method, r.amount) for r in rows] == [
            ("cash", pytest.approx(67.00)),
            ("aba", pytest.approx(58.75)),
            ("card", pytest.approx(32.00)),
        ]

    def test_recent_orders_newest_first(self, seeded_store):
        rows = DashboardService(seeded_store).recent_orders(_day(date(2025, 10, 6)))
        assert [o.id for o in rows] == ["sale-5", "sale-3", "sale-2", "sale-1"]


# ============== Aggregations on fresh orders ==============

@pytest.fixture
def sales(store, menu):
    """Completed orders placed now, plus one draft that must be ignored."""
    service = OrderService(store)
    service.create_order(
        {"status": "completed", "payment_method": "cash"},
        [
            {"product_id": menu["cola"].id, "quantity": 3, "price": Decimal("2.00")},
            {"product_id": menu["burger"].id, "quantity": 1, "price": Decimal("10.50")},
        ],
    )
    service.create_order(
        {"status": "completed", "discount": Decimal("10"), "discount_type": "percentage"},
        [
            {"product_id": menu["tea"].id, "quantity": 3, "price": Decimal("1.50")},
            {"product_id": menu["cola"].id, "quantity": 1, "price": Decimal("2.00")},
        ],
    )
    service.create_order(
        {},
        [{"product_id": menu["burger"].id, "quantity": 9, "price": Decimal("10.50")}],
    )
    return store


class TestAggregations:
    """Aggregations recomputed from the store."""

    def test_stats_subtract_stored_discount(self, sales):
        stats = DashboardService(sales).stats(resolve_window("all"))
        # Orders: 16.50 and 6.50 - 0.65 = 5.85; the second stores discount 10
        assert stats.today_sales == pytest.approx(22.35)
        assert stats.total_revenue == pytest.approx(22.35 - 10)
        assert stats.today_orders == 2

    def test_percentage_discount_counts_as_its_rate(self, store, menu):
        OrderService(store).create_order(
            {"status": "completed", "discount": Decimal("10"), "discount_type": "percentage"},
            [{"product_id": menu["burger"].id, "quantity": 2, "price": Decimal("10.50")}],
        )
        stats = DashboardService(store).stats(resolve_window("all"))
        assert stats.today_sales == pytest.approx(18.90)
        assert stats.total_revenue == pytest.approx(8.90)
        assert stats.profit_loss == pytest.approx(8.90)

    def test_sales_by_category_sums_item_totals(self, sales):
        rows = DashboardService(sales).sales_by_category(resolve_window("all"))
        assert [(r.category, r.revenue) for r in rows] == [
            ("Drinks", pytest.approx(12.50)),
            ("Food", pytest.approx(10.50)),
        ]

    def test_sales_by_category_matches_item_totals(self, sales):
        rows = DashboardService(sales).sales_by_category(resolve_window("all"))
        expected = sum(
            item.total
            for order in sales.completed_orders()
            for item in sales.items_for_order(order.id)
        )
        assert sum(r.revenue for r in rows) == pytest.approx(float(expected))

    def test_missing_payment_method(self, sales):
        rows = DashboardService(sales).sales_by_payment_method(resolve_window("all"))
        assert {r.payment_method for r in rows} == {"cash", "Not specified"}

    def test_popular_products(self, sales):
        rows = DashboardService(sales).popular_products(resolve_window("all"))
        assert [(r.product, r.quantity) for r in rows] == [("Cola", 4), ("Tea", 3), ("Burger", 1)]
        assert rows[0].revenue == pytest.approx(8.00)

    def test_popular_products_top_five_stable(self, store):
        category = store.categories.add(Category(name="Misc", slug="misc"))
        order = store.orders.add(Order(
            order_number="1", subtotal=Decimal(0), total=Decimal(0), status="completed",
        ))
        for name in ["A", "B", "C", "D", "E", "F", "G"]:
            product = store.products.add(Product(name=name, price=Decimal("1"), category_id=category.id))
            quantity = 5 if name == "F" else 1
            store.order_items.add(OrderItem(
                order_id=order.id, product_id=product.id, quantity=quantity,
                price=Decimal("1"), total=Decimal(quantity),
            ))
        rows = DashboardService(store).popular_products(resolve_window("all"))
        assert [r.product for r in rows] == ["F", "A", "B", "C", "D"]

    def test_recent_orders_capped_at_ten(self, store, menu):
        service = OrderService(store)
        for _ in range(12):
            service.create_order(
                {"status": "completed"},
                [{"product_id": menu["tea"].id, "quantity": 1, "price": Decimal("1.50")}],
            )
        rows = DashboardService(store).recent_orders(resolve_window("all"))
        assert len(rows) == 10

    def test_empty_store(self, store):
        service = DashboardService(store)
        window = resolve_window("all")
        stats = service.stats(window)
        assert stats.today_sales == 0
        assert stats.total_orders == 0
        assert service.sales_by_category(window) == []
        assert service.popular_products(window) == []
        assert service.recent_orders(window) == []
