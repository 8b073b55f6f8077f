"""Entity store over a database session.

The store owns one repository per entity family, the business-settings
singleton and the order-number sequence, and offers ``unit_of_work()``
for multi-step mutations that must apply completely or not at all.
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterator, List, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from bondpos.core import clock
from bondpos.core.config import settings
from bondpos.db.repository import SqlRepository
from bondpos.models import (
    Attendance,
    BusinessSettings,
    Category,
    Counter,
    DiningTable,
    Employee,
    Expense,
    ExpenseCategory,
    Leave,
    Order,
    OrderItem,
    OrderSource,
    OrderStatus,
    Payroll,
    Product,
    Purchase,
    StaffSalary,
)

logger = logging.getLogger(__name__)

# The in-memory database lives on a single shared connection, so sessions
# take turns on it: reads, units of work and session teardown hold this lock.
database_lock = threading.RLock()

ORDER_NUMBER_COUNTER = "order_number"


class OrderNumberSequence:
    """Monotonic counter for human-facing order numbers.

    The next value lives in the ``counters`` table, so a number taken inside
    a unit of work that rolls back is handed out again.
    """

    def __init__(self, store: "Store", start: int = 1):
        self.store = store
        self.start = start

    def _row(self) -> Counter:
        counter = self.store.session.get(Counter, ORDER_NUMBER_COUNTER)
        if counter is None:
            counter = Counter(name=ORDER_NUMBER_COUNTER, next_value=self.start)
            self.store.session.add(counter)
        return counter

    def next(self) -> int:
        with self.store.unit_of_work():
            counter = self._row()
            value = counter.next_value
            counter.next_value = value + 1
            self.store.session.flush()
            return value

    def peek(self) -> int:
        """Value the next call to ``next()`` will return."""
        with self.store.lock:
            counter = self.store.session.get(Counter, ORDER_NUMBER_COUNTER)
            return counter.next_value if counter is not None else self.start

    def reset(self, value: int) -> None:
        with self.store.unit_of_work():
            self._row().next_value = value
            self.store.session.flush()


@dataclass(frozen=True)
class OrderItemWithProduct:
    item: OrderItem
    product: Product


class Store:
    """Entity store bound to one SQLAlchemy session."""

    def __init__(self, session: Session, order_number_start: int = 1):
        self.session = session
        self.lock = database_lock
        self._depth = 0

        self.categories = SqlRepository[Category](self, Category, "Category")
        self.products = SqlRepository[Product](self, Product, "Product")
        self.tables = SqlRepository[DiningTable](self, DiningTable, "Table")
        self.orders = SqlRepository[Order](self, Order, "Order")
        self.order_items = SqlRepository[OrderItem](self, OrderItem, "Order item")
        self.expense_categories = SqlRepository[ExpenseCategory](self, ExpenseCategory, "Expense category")
        self.expenses = SqlRepository[Expense](self, Expense, "Expense")
        self.purchases = SqlRepository[Purchase](self, Purchase, "Purchase")
        self.employees = SqlRepository[Employee](self, Employee, "Employee")
        self.attendance = SqlRepository[Attendance](self, Attendance, "Attendance")
        self.leaves = SqlRepository[Leave](self, Leave, "Leave")
        self.payroll = SqlRepository[Payroll](self, Payroll, "Payroll")
        self.staff_salaries = SqlRepository[StaffSalary](self, StaffSalary, "Staff salary")

        self.order_numbers = OrderNumberSequence(self, order_number_start)

    @property
    def repositories(self) -> Dict[str, SqlRepository]:
        return {
            name: value
            for name, value in vars(self).items()
            if isinstance(value, SqlRepository)
        }

    @contextmanager
    def unit_of_work(self) -> Iterator["Store"]:
        """Apply a group of mutations atomically.

        The outermost block commits the session on success and rolls it back
        if the block raises; nested blocks join the outer one.
        """
        with self.lock:
            if self._depth:
                self._depth += 1
                try:
                    yield self
                finally:
                    self._depth -= 1
                return

            self._depth = 1
            try:
                yield self
                self.session.commit()
            except Exception as e:
                self.session.rollback()
                logger.warning(f"Unit of work rolled back: {e!r}")
                raise
            finally:
                self._depth = 0

    # =========================================================================
    # Settings singleton
    # =========================================================================

    def get_settings(self) -> BusinessSettings:
        """Return the settings, creating the defaults on first access."""
        with self.lock:
            current = self.session.scalars(select(BusinessSettings)).first()
            if current is not None:
                return current
            with self.unit_of_work():
                current = BusinessSettings()
                self.session.add(current)
                self.session.flush()
                return current

    def update_settings(self, **changes) -> BusinessSettings:
        for key in ("id", "pk", "updated_at"):
            changes.pop(key, None)
        with self.unit_of_work():
            current = self.get_settings()
            for key, value in changes.items():
                setattr(current, key, value)
            current.updated_at = clock.now()
            self.session.flush()
            return current

    # =========================================================================
    # Queries
    # =========================================================================

    def products_by_category(self, category_id: str) -> List[Product]:
        return self.products.filter(Product.category_id == category_id)

    def draft_orders(self) -> List[Order]:
        return self.orders.filter(Order.status == OrderStatus.DRAFT.value)

    def qr_orders(self) -> List[Order]:
        """QR-menu orders still waiting for staff to accept or reject them."""
        return self.orders.filter(
            Order.order_source == OrderSource.QR.value,
            Order.status == OrderStatus.QR_PENDING.value,
        )

    def completed_orders(self) -> List[Order]:
        return self.orders.filter(Order.status == OrderStatus.COMPLETED.value)

    def items_for_order(self, order_id: str) -> List[OrderItem]:
        return self.order_items.filter(OrderItem.order_id == order_id)

    def items_with_products(self, order_id: str) -> List[OrderItemWithProduct]:
        """Order lines joined with their product; lines whose product is gone are skipped."""
        query = (
            select(OrderItem, Product)
            .join(Product, Product.id == OrderItem.product_id)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.pk)
        )
        with self.lock:
            rows = self.session.execute(query).all()
        return [OrderItemWithProduct(item=item, product=product) for item, product in rows]

    def attendance_on(self, day: Union[date, datetime]) -> List[Attendance]:
        if isinstance(day, datetime):
            day = clock.localize(day).date()
        start = datetime.combine(day, time.min, tzinfo=settings.tzinfo)
        return self.attendance.filter(
            Attendance.date >= start,
            Attendance.date < start + timedelta(days=1),
        )

    def attendance_for_employee(self, employee_id: str) -> List[Attendance]:
        return self.attendance.filter(Attendance.employee_id == employee_id)

    def leaves_for_employee(self, employee_id: str) -> List[Leave]:
        return self.leaves.filter(Leave.employee_id == employee_id)

    def payroll_for_employee(self, employee_id: str) -> List[Payroll]:
        return self.payroll.filter(Payroll.employee_id == employee_id)
