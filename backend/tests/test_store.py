"""Tests for the entity store: repositories, unit of work, sequence, seed."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from bondpos.core.exceptions import NotFoundError
from bondpos.db.store import OrderNumberSequence, Store
from bondpos.models import Attendance, Category, Leave, Order, OrderItem, Payroll, Product


class TestRepository:
    """CRUD contract of SqlRepository."""

    def test_add_get_list(self, store):
        first = store.categories.add(Category(name="Rice", slug="rice"))
        second = store.categories.add(Category(name="Soup", slug="soup"))
        assert store.categories.get(first.id) == first
        assert store.categories.list() == [first, second]
        assert len(store.categories) == 2

    def test_generated_ids_are_unique(self, store):
        ids = {store.categories.add(Category(name=f"C{i}", slug=f"c{i}")).id for i in range(50)}
        assert len(ids) == 50

    def test_update_is_shallow_merge(self, store):
        product = store.products.add(Product(name="Cola", price=Decimal("2.00"), category_id="c1"))
        updated = store.products.update(product.id, price=Decimal("2.50"))
        assert updated.price == Decimal("2.50")
        assert updated.name == "Cola"
        assert updated.created_at == product.created_at
        assert store.products.get(product.id).price == Decimal("2.50")

    def test_update_ignores_id(self, store):
        category = store.categories.add(Category(name="Rice", slug="rice"))
        updated = store.categories.update(category.id, id="hijack", name="Grains")
        assert updated.id == category.id
        assert store.categories.get("hijack") is None

    def test_update_missing_returns_none(self, store):
        assert store.categories.update("missing", name="x") is None

    def test_delete(self, store):
        category = store.categories.add(Category(name="Rice", slug="rice"))
        assert store.categories.delete(category.id) is True
        assert store.categories.delete(category.id) is False
        assert store.categories.list() == []

    def test_require_patch_remove_raise_not_found(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.products.require("missing")
        assert exc_info.value.message == "Product not found"
        with pytest.raises(NotFoundError):
            store.products.patch("missing", name="x")
        with pytest.raises(NotFoundError):
            store.products.remove("missing")

    def test_category_delete_leaves_products(self, store):
        category = store.categories.add(Category(name="Rice", slug="rice"))
        product = store.products.add(Product(name="Fried Rice", price=Decimal("9"), category_id=category.id))
        store.categories.delete(category.id)
        assert store.products.get(product.id).category_id == category.id


class TestUnitOfWork:
    """Atomic multi-step mutations."""

    def test_commits_on_success(self, store):
        with store.unit_of_work():
            store.categories.add(Category(name="Rice", slug="rice"))
            store.order_numbers.next()
        assert len(store.categories) == 1
        assert store.order_numbers.peek() == 21

    def test_rolls_back_everything_on_error(self, store):
        existing = store.categories.add(Category(name="Rice", slug="rice"))
        store.get_settings()
        with pytest.raises(RuntimeError):
            with store.unit_of_work():
                store.categories.update(existing.id, name="Changed")
                store.categories.add(Category(name="Soup", slug="soup"))
                store.order_numbers.next()
                store.update_settings(business_name="Mid-flight")
                raise RuntimeError("boom")
        assert store.categories.list() == [existing]
        assert store.order_numbers.peek() == 20
        assert store.get_settings().business_name == "BondPos POS"


class TestOrderNumberSequence:
    """Order-number sequence backed by the counters table."""

    def test_starts_at_injected_value(self, store):
        sequence = OrderNumberSequence(store, start=100)
        assert sequence.peek() == 100
        assert sequence.next() == 100
        assert sequence.next() == 101

    def test_reset(self, store):
        sequence = OrderNumberSequence(store)
        sequence.next()
        sequence.reset(7)
        assert sequence.next() == 7

    def test_counter_is_shared_through_the_database(self, db_session):
        a = Store(db_session, order_number_start=5)
        assert a.order_numbers.peek() == 5
        a.order_numbers.next()
        b = Store(db_session, order_number_start=5)
        assert b.order_numbers.peek() == 6

    def test_nested_unit_of_work_rolls_back_with_outer(self, store):
        with pytest.raises(ValueError):
            with store.unit_of_work():
                with store.unit_of_work():
                    store.order_numbers.next()
                raise ValueError("outer failed")
        assert store.order_numbers.peek() == 20


class TestSettingsSingleton:
    """Business settings."""

    def test_created_lazily_with_defaults(self, store):
        settings = store.get_settings()
        assert settings.business_name == "BondPos POS"
        assert settings.payment_cash == "true"
        assert settings.max_discount == Decimal("50")
        assert store.get_settings() is settings

    def test_update_merges_and_stamps(self, store):
        before = store.get_settings()
        after = store.update_settings(business_name="Corner Cafe", vat_rate=Decimal("10"))
        assert after.id == before.id
        assert after.business_name == "Corner Cafe"
        assert after.vat_rate == Decimal("10")
        assert after.invoice_prefix == before.invoice_prefix
        assert after.updated_at >= before.updated_at


class TestQueries:
    """Filtered views over the store."""

    def test_order_queues(self, store):
        draft = store.orders.add(Order(order_number="1", subtotal=Decimal(0), total=Decimal(0)))
        qr = store.orders.add(Order(
            order_number="2", subtotal=Decimal(0), total=Decimal(0), order_source="qr", status="qr-pending",
        ))
        done = store.orders.add(Order(
            order_number="3", subtotal=Decimal(0), total=Decimal(0), status="completed",
        ))
        assert store.draft_orders() == [draft]
        assert store.qr_orders() == [qr]
        assert store.completed_orders() == [done]

    def test_items_with_products_skips_missing(self, store):
        product = store.products.add(Product(name="Cola", price=Decimal("2"), category_id="c"))
        store.order_items.add(OrderItem(
            order_id="o1", product_id=product.id, quantity=1, price=Decimal("2"), total=Decimal("2"),
        ))
        store.order_items.add(OrderItem(
            order_id="o1", product_id="gone", quantity=1, price=Decimal("2"), total=Decimal("2"),
        ))
        joined = store.items_with_products("o1")
        assert len(store.items_for_order("o1")) == 2
        assert [j.product.id for j in joined] == [product.id]

    def test_hr_filters(self, store):
        store.attendance.add(Attendance(employee_id="1", date=datetime(2025, 10, 6, 9, 0), status="present"))
        store.attendance.add(Attendance(employee_id="2", date=datetime(2025, 10, 6, 9, 5), status="late"))
        store.attendance.add(Attendance(employee_id="1", date=datetime(2025, 10, 7, 9, 0), status="present"))
        store.leaves.add(Leave(
            employee_id="2", leave_type="sick", start_date=datetime(2025, 10, 8), end_date=datetime(2025, 10, 9),
        ))
        store.payroll.add(Payroll(
            employee_id="1", month="10", year="2025", base_salary=Decimal("5000"), net_salary=Decimal("5000"),
        ))

        assert len(store.attendance_on(date(2025, 10, 6))) == 2
        assert len(store.attendance_for_employee("1")) == 2
        assert len(store.leaves_for_employee("2")) == 1
        assert store.leaves_for_employee("1") == []
        assert len(store.payroll_for_employee("1")) == 1


class TestDemoSeed:
    """The demo data set."""

    def test_counts(self, seeded_store):
        assert len(seeded_store.categories) == 5
        assert len(seeded_store.products) == 24
        assert len(seeded_store.tables) == 8
        assert len(seeded_store.employees) == 8
        assert len(seeded_store.orders) == 8
        assert len(seeded_store.order_items) == 9
        assert len(seeded_store.expense_categories) == 5
        assert len(seeded_store.expenses) == 3
        assert len(seeded_store.purchases) == 3

    def test_sequence_continues_after_seed(self, seeded_store):
        assert seeded_store.order_numbers.peek() == 9

    def test_queues(self, seeded_store):
        assert len(seeded_store.completed_orders()) == 4
        assert [o.id for o in seeded_store.qr_orders()] == ["qr-order-1", "qr-order-2", "qr-order-3"]
        assert seeded_store.draft_orders() == []

    def test_products_by_category(self, seeded_store):
        pizzas = seeded_store.products_by_category("5")
        assert [p.name for p in pizzas] == ["Vegetable Pizza", "Margherita Pizza", "Pepperoni Pizza"]
