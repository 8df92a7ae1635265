"""
Service layer.

Services expose the repository operations unchanged; the only thing they add
is the transaction boundary (``services.base.transactional``).
"""

from services.customer_service import CustomerService
from services.order_service import OrderService
from services.product_service import ProductService
from services.user_service import UserService

__all__ = [
    "CustomerService",
    "OrderService",
    "ProductService",
    "UserService",
]
