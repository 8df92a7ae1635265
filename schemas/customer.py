"""
Pydantic records for customers and the customer summary projection
"""

from pydantic import BaseModel, validator
from typing import Optional
from datetime import datetime
from decimal import Decimal
from models.base import DEFAULT_CUSTOMER_STATUS
from schemas.money import to_money, ZERO


class Customer(BaseModel):
    """
    A customers row.

    ``id`` and ``created_at`` are unset until the row is persisted; both are
    ignored when the record is used as a request body.
    """
    id: Optional[int] = None
    name: str
    email: str
    status: str = DEFAULT_CUSTOMER_STATUS
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john.doe@example.com",
                "status": "ACTIVE"
            }
        }


class CustomerSummary(BaseModel):
    """Customer with order count and lifetime spend (read-only)"""
    id: int
    name: str
    email: str
    order_count: int = 0
    total_spent: Decimal = ZERO

    @validator("total_spent", pre=True, always=True)
    def coerce_total_spent(cls, v):
        return to_money(v) if v is not None else ZERO
