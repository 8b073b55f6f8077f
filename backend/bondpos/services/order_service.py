"""Order Service.

Owns order arithmetic, the status state machine and the side effects of
placing an order (order number, line items, table occupancy).
"""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Sequence, Tuple

from bondpos.core import clock
from bondpos.core.exceptions import InvalidStatusTransition
from bondpos.core.metrics import metrics
from bondpos.db.store import OrderItemWithProduct, Store
from bondpos.models import DiscountType, Order, OrderItem, OrderStatus, TableStatus

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """Quantise to cents, rounding half up."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    effective_discount: Decimal
    total: Decimal


def apply_discount(
    subtotal: Any,
    discount: Any = 0,
    discount_type: str = DiscountType.AMOUNT.value,
) -> OrderTotals:
    """Apply an amount or percentage discount to a known subtotal.

    The effective discount is clamped to ``[0, subtotal]`` so a total can
    never go negative or exceed the subtotal.
    """
    subtotal = to_money(subtotal)
    discount = Decimal(str(discount or 0))
    if discount_type == DiscountType.PERCENTAGE.value:
        effective = subtotal * discount / Decimal(100)
    else:
        effective = discount
    effective = to_money(min(max(effective, Decimal(0)), subtotal))
    return OrderTotals(subtotal=subtotal, effective_discount=effective, total=subtotal - effective)


def compute_totals(
    lines: Iterable[Tuple[Any, int]],
    discount: Any = 0,
    discount_type: str = DiscountType.AMOUNT.value,
) -> OrderTotals:
    """Totals for ``(unit_price, quantity)`` lines after discount."""
    subtotal = sum((Decimal(str(price)) * quantity for price, quantity in lines), Decimal(0))
    return apply_discount(subtotal, discount, discount_type)


# Legal moves between order statuses. Anything not listed is rejected.
ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    OrderStatus.DRAFT.value: frozenset({OrderStatus.COMPLETED.value, OrderStatus.CANCELLED.value}),
    OrderStatus.QR_PENDING.value: frozenset({OrderStatus.PENDING.value, OrderStatus.CANCELLED.value}),
    OrderStatus.PENDING.value: frozenset(
        {OrderStatus.CONFIRMED.value, OrderStatus.COMPLETED.value, OrderStatus.CANCELLED.value}
    ),
    OrderStatus.CONFIRMED.value: frozenset({OrderStatus.COMPLETED.value, OrderStatus.CANCELLED.value}),
    OrderStatus.COMPLETED.value: frozenset(),
    OrderStatus.CANCELLED.value: frozenset(),
}


def check_transition(current: str, target: str) -> bool:
    """Validate a status change.

    Returns False when ``target`` equals ``current`` (nothing to do) and True
    when the move is legal. Raises InvalidStatusTransition otherwise.
    """
    if current == target:
        return False
    allowed = ALLOWED_TRANSITIONS.get(current, frozenset())
    if target not in allowed:
        raise InvalidStatusTransition(current, target, allowed)
    return True


@dataclass(frozen=True)
class OrderWithItems:
    order: Order
    items: List[OrderItemWithProduct] = field(default_factory=list)


class OrderService:
    """Order lifecycle operations over a store."""

    def __init__(self, store: Store):
        self.store = store

    def _status_changes(self, order: Order, target: str) -> Dict[str, Any]:
        try:
            changed = check_transition(order.status, target)
        except InvalidStatusTransition:
            logger.warning(f"Rejected status change for order {order.order_number}: {order.status} -> {target}")
            raise
        if not changed:
            return {}
        changes: Dict[str, Any] = {"status": target}
        if target == OrderStatus.COMPLETED.value:
            changes["completed_at"] = clock.now()
        return changes

    def create_order(self, data: Mapping[str, Any], items: Sequence[Mapping[str, Any]] = ()) -> OrderWithItems:
        """Place an order with its line items.

        Runs as one unit of work: the order number, the order, its items and
        the table occupancy are applied together or not at all. Line totals,
        the subtotal (when items are given) and the order total are computed
        here; client-supplied values for them are ignored.
        """
        fields = dict(data)
        fields.pop("total", None)
        fields.pop("completed_at", None)
        client_subtotal = fields.pop("subtotal", None)
        discount = fields.pop("discount", None) or Decimal(0)
        discount_type = fields.pop("discount_type", None) or DiscountType.AMOUNT.value
        status = fields.pop("status", None) or OrderStatus.DRAFT.value

        lines = [(Decimal(str(item["price"])), int(item["quantity"])) for item in items]
        if lines:
            totals = compute_totals(lines, discount, discount_type)
        else:
            totals = apply_discount(client_subtotal or 0, discount, discount_type)

        with self.store.unit_of_work() as store:
            created_at = clock.now()
            order = store.orders.add(Order(
                **fields,
                order_number=str(store.order_numbers.next()),
                subtotal=totals.subtotal,
                discount=to_money(discount),
                discount_type=discount_type,
                total=totals.total,
                status=status,
                created_at=created_at,
                completed_at=created_at if status == OrderStatus.COMPLETED.value else None,
            ))

            for item in items:
                price = to_money(item["price"])
                quantity = int(item["quantity"])
                store.order_items.add(OrderItem(
                    order_id=order.id,
                    product_id=item["product_id"],
                    quantity=quantity,
                    price=price,
                    total=to_money(price * quantity),
                ))

            if order.table_id:
                store.tables.require(order.table_id)
                store.tables.update(order.table_id, status=TableStatus.OCCUPIED.value)
                logger.info(f"Table {order.table_id} occupied by order {order.order_number}")

            result = OrderWithItems(order=order, items=store.items_with_products(order.id))

        metrics.record_order_created()
        logger.info(
            f"Order {order.order_number} created ({order.status}, {len(items)} items, total {order.total})"
        )
        return result

    def get_order(self, order_id: str) -> Order:
        return self.store.orders.require(order_id)

    def get_order_with_items(self, order_id: str) -> OrderWithItems:
        return self._with_items(self.store.orders.require(order_id))

    def update_order(self, order_id: str, changes: Mapping[str, Any]) -> Order:
        """Partially update an order.

        A status in ``changes`` goes through the state machine. A change to
        subtotal, discount or discount type recomputes the total.
        """
        changes = dict(changes)
        changes.pop("total", None)
        changes.pop("completed_at", None)
        target = changes.pop("status", None)
        for key in ("subtotal", "discount", "discount_type"):
            if key in changes and changes[key] is None:
                del changes[key]

        with self.store.unit_of_work() as store:
            order = store.orders.require(order_id)
            previous_status = order.status
            if {"subtotal", "discount", "discount_type"} & changes.keys():
                totals = apply_discount(
                    changes.get("subtotal", order.subtotal),
                    changes.get("discount", order.discount),
                    changes.get("discount_type", order.discount_type),
                )
                changes["subtotal"] = totals.subtotal
                if "discount" in changes:
                    changes["discount"] = to_money(changes["discount"])
                changes["total"] = totals.total
            if target is not None:
                changes.update(self._status_changes(order, target))
            updated = store.orders.update(order_id, **changes)

        if target is not None and updated.status != previous_status:
            logger.info(f"Order {updated.order_number} status {previous_status} -> {updated.status}")
        return updated

    def update_status(self, order_id: str, status: str) -> Order:
        return self.update_order(order_id, {"status": status})

    def accept_qr_order(self, order_id: str) -> Order:
        """Move a QR-menu order into the regular pending queue."""
        return self.update_status(order_id, OrderStatus.PENDING.value)

    def reject_qr_order(self, order_id: str) -> Order:
        return self.update_status(order_id, OrderStatus.CANCELLED.value)

    def delete_order(self, order_id: str) -> None:
        """Delete an order and its items.

        The table the order occupied keeps its status; staff release it
        through the table status endpoint.
        """
        with self.store.unit_of_work() as store:
            order = store.orders.require(order_id)
            removed = store.order_items.delete_where(OrderItem.order_id == order_id)
            store.orders.delete(order_id)
        logger.info(f"Order {order.order_number} deleted with {removed} items")

    def draft_orders(self) -> List[OrderWithItems]:
        """Drafts with their lines, ready to be resumed at the till."""
        return [self._with_items(order) for order in self.store.draft_orders()]

    def qr_queue(self) -> List[OrderWithItems]:
        """QR-menu orders awaiting review, with their lines."""
        return [self._with_items(order) for order in self.store.qr_orders()]

    def _with_items(self, order: Order) -> OrderWithItems:
        return OrderWithItems(order=order, items=self.store.items_with_products(order.id))

    def list_items(self, order_id: str) -> List[OrderItemWithProduct]:
        self.store.orders.require(order_id)
        return self.store.items_with_products(order_id)

