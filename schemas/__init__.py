"""
Pydantic schemas for records, projections and API responses.

Records mirror one table row each and double as request bodies; fields the
database assigns (ids, timestamps) are optional and ignored on input.
Projections are computed per query and never written back.

Schemas:
    customer: Customer, CustomerSummary
    order: Order, OrderItem, OrderStatistics
    product: Product
    user: User, UserSummary, UserFilter, UserStatus
    api: HealthCheckResponse, ErrorResponse, DeletedCount
    money: two-place Decimal coercion shared by monetary fields

Usage:
    from schemas.customer import Customer
    customer = Customer(name="Test User", email="test@example.com")
    assert customer.status == "ACTIVE"
"""

__all__ = [
    "Customer",
    "CustomerSummary",
    "Order",
    "OrderItem",
    "OrderStatistics",
    "Product",
    "User",
    "UserSummary",
    "UserFilter",
    "UserStatus",
    "HealthCheckResponse",
    "ErrorResponse",
    "DeletedCount",
]
