from pydantic import BaseModel, validator
from typing import Optional
from decimal import Decimal
from schemas.money import to_column_money


class Product(BaseModel):
    """A products row"""
    id: Optional[int] = None
    name: str
    price: Decimal
    stock_quantity: int = 0

    @validator("price", pre=True)
    def coerce_price(cls, v):
        return to_column_money(v)

    class Config:
        from_attributes = True
