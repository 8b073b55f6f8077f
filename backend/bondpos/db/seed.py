"""Demo data loaded into a fresh store at startup."""

import logging
from datetime import datetime
from decimal import Decimal

from bondpos.core import clock
from bondpos.db.store import Store
from bondpos.models import (
    Category,
    DiningTable,
    Employee,
    Expense,
    ExpenseCategory,
    Order,
    OrderItem,
    Product,
    Purchase,
)

logger = logging.getLogger(__name__)

CATEGORIES = [
    ("1", "Rice", "rice"),
    ("2", "Beverages", "beverages"),
    ("3", "Salads", "salads"),
    ("4", "Soup", "soup"),
    ("5", "Pizza", "pizza"),
]

# (id, name, price, category_id, unit, description, quantity)
PRODUCTS = [
    ("1", "Shrimp Basil Salad", "10.60", "3", "plate", "Fresh shrimp with basil and greens", "50"),
    ("2", "Onion Rings", "8.50", "2", "serving", "Crispy fried onion rings", "100"),
    ("3", "Smoked Bacon", "12.00", "3", "serving", "Premium smoked bacon strips", "75"),
    ("4", "Fresh Tomatoes", "9.50", "3", "kg", "Organic fresh tomatoes", "25"),
    ("5", "Chicken Burger", "10.50", "4", "piece", "Juicy grilled chicken burger", "60"),
    ("6", "Red Onion Rings", "8.50", "2", "serving", "Red onion rings with special sauce", "80"),
    ("7", "Beef Burger", "10.50", "4", "piece", "Classic beef burger with cheese", "55"),
    ("8", "Grilled Burger", "10.50", "4", "piece", "Premium grilled burger", "45"),
    ("9", "Fresh Basil Salad", "8.50", "3", "plate", "Garden fresh basil salad", "70"),
    ("10", "Vegetable Pizza", "15.00", "5", "piece", "Mixed vegetable pizza", "40"),
    ("11", "Fish & Chips", "12.50", "4", "serving", "Crispy fish with fries", "35"),
    ("12", "Fried Rice", "9.00", "1", "plate", "Classic fried rice", "90"),
    ("13", "Biryani Rice", "11.00", "1", "plate", "Aromatic biryani rice", "65"),
    ("14", "Chicken Rice", "10.00", "1", "plate", "Tender chicken with rice", "85"),
    ("15", "Caesar Salad", "9.50", "3", "plate", "Classic caesar salad", "55"),
    ("16", "Greek Salad", "10.00", "3", "plate", "Traditional greek salad", "50"),
    ("17", "Tomato Soup", "6.50", "4", "bowl", "Creamy tomato soup", "100"),
    ("18", "Mushroom Soup", "7.00", "4", "bowl", "Rich mushroom soup", "95"),
    ("19", "Margherita Pizza", "14.00", "5", "piece", "Classic margherita pizza", "42"),
    ("20", "Pepperoni Pizza", "16.00", "5", "piece", "Spicy pepperoni pizza", "38"),
    ("21", "Orange Juice", "4.50", "2", "glass", "Fresh orange juice", "120"),
    ("22", "Mango Juice", "4.50", "2", "glass", "Sweet mango juice", "110"),
    ("23", "Coffee", "3.50", "2", "cup", "Fresh brewed coffee", "200"),
    ("24", "Green Tea", "3.00", "2", "cup", "Organic green tea", "150"),
]

TABLES = [
    ("1", "4", "Window seat table"),
    ("2", "2", "Small corner table"),
    ("3", "6", "Large family table"),
    ("4", "4", "Center table"),
    ("5", "2", "Quiet corner"),
    ("6", "8", "Party table"),
    ("7", "4", "Near entrance"),
    ("8", "4", "Outdoor patio"),
]

# (id, code, name, position, department, joined, salary)
EMPLOYEES = [
    ("1", "EMP001", "John Smith", "Manager", "Admin", "2024-01-15", "5000.00"),
    ("2", "EMP002", "Sarah Johnson", "Head Chef", "Kitchen", "2024-02-01", "4500.00"),
    ("3", "EMP003", "Michael Chen", "Sous Chef", "Kitchen", "2024-03-10", "3500.00"),
    ("4", "EMP004", "Emma Wilson", "Waitress", "Service", "2024-04-05", "2500.00"),
    ("5", "EMP005", "David Martinez", "Waiter", "Service", "2024-04-20", "2500.00"),
    ("6", "EMP006", "Lisa Anderson", "Receptionist", "Reception", "2024-05-01", "2800.00"),
    ("7", "EMP007", "Robert Taylor", "Accountant", "Finance", "2024-06-15", "4000.00"),
    ("8", "EMP008", "Jennifer Lee", "HR Manager", "HR", "2024-07-01", "4200.00"),
]

EXPENSE_CATEGORIES = [
    ("exp-cat-1", "Office Supplies", "Stationery, printing, and office materials"),
    ("exp-cat-2", "Travel", "Transportation and travel expenses"),
    ("exp-cat-3", "Utilities", "Electricity, water, and internet"),
    ("exp-cat-4", "Food & Ingredients", "Raw materials and ingredients for kitchen"),
    ("exp-cat-5", "Maintenance", "Repairs and maintenance"),
]


def _at(value: str) -> datetime:
    return clock.localize(datetime.fromisoformat(value))


def _seed_orders(store: Store) -> None:
    sales = [
        # id, number, table, dining, customer, subtotal, discount, total, status, payment status, method, created, completed
        ("sale-1", "1", "1", "dine-in", "John Smith", "45.50", "5.00", "40.50", "completed", "paid", "cash",
         "2025-10-06T10:30:00", "2025-10-06T10:45:00"),
        ("sale-2", "2", None, "takeaway", "Sarah Johnson", "32.00", "0.00", "32.00", "completed", "paid", "card",
         "2025-10-06T11:15:00", "2025-10-06T11:30:00"),
        ("sale-3", "3", "3", "dine-in", "Michael Brown", "68.75", "10.00", "58.75", "completed", "paid", "aba",
         "2025-10-06T12:00:00", "2025-10-06T12:20:00"),
        ("sale-4", "4", None, "delivery", "Emily Davis", "55.20", "0.00", "55.20", "confirmed", "pending", None,
         "2025-10-06T13:45:00", None),
        ("sale-5", "5", "5", "dine-in", None, "28.50", "2.00", "26.50", "completed", "paid", "cash",
         "2025-10-06T14:20:00", "2025-10-06T14:35:00"),
    ]
    for (order_id, number, table_id, dining, customer, subtotal, discount, total,
         status, payment_status, method, created, completed) in sales:
        store.orders.add(Order(
            id=order_id,
            order_number=number,
            table_id=table_id,
            dining_option=dining,
            customer_name=customer,
            subtotal=Decimal(subtotal),
            discount=Decimal(discount),
            total=Decimal(total),
            status=status,
            payment_status=payment_status,
            payment_method=method,
            created_at=_at(created),
            completed_at=_at(completed) if completed else None,
        ))

    qr_orders = [
        ("qr-order-1", "6", "2", "dine-in", "James Wilson", "+1234567890", "42.00"),
        ("qr-order-2", "7", "4", "dine-in", "Linda Martinez", "+1234567891", "67.50"),
        ("qr-order-3", "8", None, "takeaway", "Robert Chen", "+1234567892", "28.00"),
    ]
    for order_id, number, table_id, dining, customer, phone, amount in qr_orders:
        store.orders.add(Order(
            id=order_id,
            order_number=number,
            table_id=table_id,
            dining_option=dining,
            customer_name=customer,
            customer_phone=phone,
            order_source="qr",
            subtotal=Decimal(amount),
            total=Decimal(amount),
            status="qr-pending",
        ))

    qr_lines = [
        ("qr-order-1", "5", 2, "10.50"),
        ("qr-order-1", "10", 1, "15.00"),
        ("qr-order-1", "21", 2, "4.50"),
        ("qr-order-2", "1", 2, "10.60"),
        ("qr-order-2", "7", 3, "10.50"),
        ("qr-order-2", "23", 2, "3.50"),
        ("qr-order-2", "24", 1, "3.00"),
        ("qr-order-3", "12", 2, "9.00"),
        ("qr-order-3", "22", 2, "4.50"),
    ]
    for order_id, product_id, quantity, price in qr_lines:
        unit_price = Decimal(price)
        store.order_items.add(OrderItem(
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            price=unit_price,
            total=unit_price * quantity,
        ))

    store.order_numbers.reset(9)


def load_demo_data(store: Store) -> None:
    """Populate ``store`` with the demo catalogue, floor plan, staff and sales."""
    with store.unit_of_work():
        catalogue_time = _at("2025-10-01T10:00:00")
        for category_id, name, slug in CATEGORIES:
            store.categories.add(Category(id=category_id, name=name, slug=slug))

        for product_id, name, price, category_id, unit, description, quantity in PRODUCTS:
            store.products.add(Product(
                id=product_id,
                name=name,
                price=Decimal(price),
                category_id=category_id,
                unit=unit,
                description=description,
                quantity=Decimal(quantity),
                created_at=catalogue_time,
            ))

        for number, capacity, description in TABLES:
            store.tables.add(DiningTable(
                id=number, table_number=number, capacity=capacity, description=description,
            ))

        for employee_id, code, name, position, department, joined, salary in EMPLOYEES:
            joined_at = _at(joined)
            email = name.lower().replace(" ", ".") + "@restrobit.com"
            store.employees.add(Employee(
                id=employee_id,
                employee_id=code,
                name=name,
                position=position,
                department=department,
                email=email,
                phone=f"+123456789{int(employee_id) - 1}",
                joining_date=joined_at,
                salary=Decimal(salary),
                created_at=joined_at,
            ))

        _seed_orders(store)

        for category_id, name, description in EXPENSE_CATEGORIES:
            store.expense_categories.add(
                ExpenseCategory(id=category_id, name=name, description=description)
            )

        expenses = [
            ("exp-1", "2025-10-06T09:00:00", "exp-cat-4", "Fresh vegetables and meat", "250.00", "Kg", "15.5"),
            ("exp-2", "2025-10-05T14:30:00", "exp-cat-3", "Monthly electricity bill", "450.00", "Unit", "1"),
            ("exp-3", "2025-10-04T11:15:00", "exp-cat-1", "Printer paper and ink", "85.50", "Box", "3"),
        ]
        for expense_id, when, category_id, description, amount, unit, quantity in expenses:
            # The demo rows carry the invoice total, not amount x quantity
            store.expenses.add(Expense(
                id=expense_id,
                expense_date=_at(when),
                category_id=category_id,
                description=description,
                amount=Decimal(amount),
                unit=unit,
                quantity=Decimal(quantity),
                total=Decimal(amount),
                created_at=_at(when),
            ))

        purchases = [
            ("purchase-1", "4", "Fresh Vegetables", "50", "Kg", "5.00", "2025-10-06T08:00:00"),
            ("purchase-2", "4", "Chicken Meat", "30", "Kg", "8.50", "2025-10-05T09:30:00"),
            ("purchase-3", "1", "Rice", "100", "Kg", "2.50", "2025-10-04T10:00:00"),
        ]
        for purchase_id, category_id, item_name, quantity, unit, price, when in purchases:
            store.purchases.add(Purchase(
                id=purchase_id,
                category_id=category_id,
                item_name=item_name,
                quantity=Decimal(quantity),
                unit=unit,
                price=Decimal(price),
                purchase_date=_at(when),
                created_at=_at(when),
            ))

    logger.info(
        f"Demo data loaded: {len(store.products)} products, {len(store.tables)} tables, "
        f"{len(store.orders)} orders"
    )
