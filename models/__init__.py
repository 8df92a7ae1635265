"""
SQLAlchemy table definitions for the storefront schema.

The declarative classes exist to create and migrate the schema
(``scripts/init_db.py``, ``alembic/``). Reads and writes never go through
the ORM: repositories issue hand-written SQL against these tables.

Models:
    base: Declarative base, shared column types and status defaults
    customer: customers
    product: products
    order: orders and order_items
    user: users

Database Schema:
    customers 1 ── * orders 1 ── * order_items * ── 1 products
    users (standalone)

Usage:
    from models import Base, CustomerTable, OrderTable
    await conn.run_sync(Base.metadata.create_all)
"""

from models.base import Base
from models.customer import CustomerTable
from models.product import ProductTable
from models.order import OrderTable, OrderItemTable
from models.user import UserTable

__all__ = [
    "Base",
    "CustomerTable",
    "ProductTable",
    "OrderTable",
    "OrderItemTable",
    "UserTable",
]
