from sqlalchemy import Column, String, Integer, text
from models.base import Base, Identifier, Money


class ProductTable(Base):
    """Catalogue products with their current price and stock level."""
    __tablename__ = "products"

    id = Column(Identifier, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    price = Column(Money, nullable=False)
    stock_quantity = Column(Integer, server_default=text("0"))
