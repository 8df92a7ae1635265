"""
Pydantic records for orders, order items and order statistics
"""

from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime
from decimal import Decimal
from models.base import DEFAULT_ORDER_STATUS
from schemas.money import to_column_money, to_money, ZERO


class Order(BaseModel):
    """An orders row. Holds the customer's id, not the customer."""
    id: Optional[int] = None
    customer_id: int
    order_date: Optional[datetime] = None
    total_amount: Decimal = ZERO
    status: str = DEFAULT_ORDER_STATUS

    @validator("total_amount", pre=True)
    def coerce_total_amount(cls, v):
        return to_column_money(v)

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "total_amount": "149.99",
                "status": "PENDING"
            }
        }


class OrderItem(BaseModel):
    """An order_items row; ``order_id`` comes from the URL when posted."""
    id: Optional[int] = None
    order_id: Optional[int] = None
    product_id: int
    quantity: int
    unit_price: Decimal

    @validator("unit_price", pre=True)
    def coerce_unit_price(cls, v):
        return to_column_money(v)


class OrderStatistics(BaseModel):
    """Order aggregates; every field is zero when there are no orders"""
    total_orders: int = 0
    total_revenue: Decimal = ZERO
    average_order_value: Decimal = ZERO
    unique_customers: int = Field(0, description="Distinct customers with at least one order")

    @validator("total_revenue", "average_order_value", pre=True, always=True)
    def coerce_money(cls, v):
        return to_money(v) if v is not None else ZERO
