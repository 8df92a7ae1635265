"""
Data access layer (Repository pattern).

Each repository owns the SQL for one table. Statements are plain SQL text with
named parameters, run through ``core.sql_client.SqlClient``; each query names
the row mapper that turns its columns into a record. Repositories never
commit: the calling service decides the transaction scope.
"""

from repositories.customer_repository import CustomerRepository
from repositories.order_repository import OrderRepository
from repositories.order_item_repository import OrderItemRepository
from repositories.product_repository import ProductRepository
from repositories.user_repository import UserRepository

__all__ = [
    "CustomerRepository",
    "OrderRepository",
    "OrderItemRepository",
    "ProductRepository",
    "UserRepository",
]
