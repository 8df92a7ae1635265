"""
Sample rows for a fresh database.

Loaded by ``scripts/init_db.py --seed`` and by the test fixtures. Order dates
are relative to the time of loading (five days ago up to now), so
"newest first" queries always have a stable answer.
"""

from datetime import datetime, timedelta
from decimal import Decimal
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from core.sql_client import SqlClient

logger = logging.getLogger(__name__)

CUSTOMERS = [
    ("John Doe", "john.doe@example.com", "ACTIVE"),
    ("Jane Smith", "jane.smith@example.com", "ACTIVE"),
    ("Bob Johnson", "bob.johnson@example.com", "INACTIVE"),
    ("Alice Williams", "alice.williams@example.com", "ACTIVE"),
    ("Charlie Brown", "charlie.brown@example.com", "ACTIVE"),
]

PRODUCTS = [
    ("Laptop", Decimal("999.99"), 50),
    ("Mouse", Decimal("29.99"), 200),
    ("Keyboard", Decimal("79.99"), 150),
    ("Monitor", Decimal("299.99"), 75),
    ("USB Cable", Decimal("9.99"), 500),
]

# (customer index, days ago, total, status)
ORDERS = [
    (0, 5, Decimal("1109.97"), "COMPLETED"),
    (1, 3, Decimal("389.97"), "COMPLETED"),
    (0, 2, Decimal("79.99"), "SHIPPED"),
    (3, 1, Decimal("299.99"), "PENDING"),
    (4, 0, Decimal("39.98"), "PENDING"),
]

# (order index, product index, quantity, unit price)
ORDER_ITEMS = [
    (0, 0, 1, Decimal("999.99")),
    (0, 1, 1, Decimal("29.99")),
    (0, 4, 8, Decimal("9.99")),
    (1, 3, 1, Decimal("299.99")),
    (1, 2, 1, Decimal("79.99")),
    (1, 4, 1, Decimal("9.99")),
    (2, 2, 1, Decimal("79.99")),
    (3, 3, 1, Decimal("299.99")),
    (4, 1, 1, Decimal("29.99")),
    (4, 4, 1, Decimal("9.99")),
]

# (email, first, last, active, age, department)
USERS = [
    ("john@example.com", "John", "Doe", True, 30, "Engineering"),
    ("jane@example.com", "Jane", "Smith", True, 28, "Marketing"),
    ("bob@example.com", "Bob", "Johnson", False, 45, "Sales"),
    ("alice@example.com", "Alice", "Williams", True, 33, "Engineering"),
    ("charlie@example.com", "Charlie", "Brown", True, 26, "Engineering"),
]


async def load_sample_data(session: AsyncSession) -> None:
    """Insert the sample rows and commit."""
    client = SqlClient(session)
    now = datetime.utcnow()

    customer_ids = []
    for name, email, status in CUSTOMERS:
        customer_ids.append(await (
            client.sql(
                "INSERT INTO customers (name, email, status) VALUES (:name, :email, :status) RETURNING id"
            )
            .params({"name": name, "email": email, "status": status})
            .update_returning_key()
        ))

    product_ids = []
    for name, price, stock in PRODUCTS:
        product_ids.append(await (
            client.sql(
                """
                INSERT INTO products (name, price, stock_quantity)
                VALUES (:name, :price, :stock_quantity)
                RETURNING id
                """
            )
            .params({"name": name, "price": price, "stock_quantity": stock})
            .update_returning_key()
        ))

    order_ids = []
    for customer_index, days_ago, total, status in ORDERS:
        order_ids.append(await (
            client.sql(
                """
                INSERT INTO orders (customer_id, order_date, total_amount, status)
                VALUES (:customer_id, :order_date, :total_amount, :status)
                RETURNING id
                """
            )
            .param("customer_id", customer_ids[customer_index])
            .param("order_date", now - timedelta(days=days_ago))
            .param("total_amount", total)
            .param("status", status)
            .update_returning_key()
        ))

    for order_index, product_index, quantity, unit_price in ORDER_ITEMS:
        await (
            client.sql(
                """
                INSERT INTO order_items (order_id, product_id, quantity, unit_price)
                VALUES (:order_id, :product_id, :quantity, :unit_price)
                """
            )
            .param("order_id", order_ids[order_index])
            .param("product_id", product_ids[product_index])
            .param("quantity", quantity)
            .param("unit_price", unit_price)
            .update()
        )

    for email, first_name, last_name, active, age, department in USERS:
        await (
            client.sql(
                """
                INSERT INTO users (email, first_name, last_name, active, age, department, created_date, last_modified)
                VALUES (:email, :first_name, :last_name, :active, :age, :department, :created_date, :created_date)
                """
            )
            .params({
                "email": email,
                "first_name": first_name,
                "last_name": last_name,
                "active": active,
                "age": age,
                "department": department,
                "created_date": now,
            })
            .update()
        )

    await session.commit()
    logger.info(
        f"Loaded sample data: {len(CUSTOMERS)} customers, {len(PRODUCTS)} products, "
        f"{len(ORDERS)} orders, {len(ORDER_ITEMS)} order items, {len(USERS)} users"
    )
