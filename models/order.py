from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, Index, func, text
from models.base import Base, Identifier, Money, DEFAULT_ORDER_STATUS


class OrderTable(Base):
    """
    Orders placed by customers.

    Holds the customer's id only; there is no ORM relationship because every
    read goes through hand-written SQL.
    """
    __tablename__ = "orders"

    id = Column(Identifier, primary_key=True, autoincrement=True)
    customer_id = Column(Identifier, ForeignKey("customers.id"), nullable=False)
    order_date = Column(DateTime, server_default=func.current_timestamp())
    total_amount = Column(Money, server_default=text("0.00"))
    status = Column(String(20), server_default=text(f"'{DEFAULT_ORDER_STATUS}'"))

    __table_args__ = (
        Index("idx_orders_customer", "customer_id"),
        Index("idx_orders_status_date", "status", "order_date"),
    )


class OrderItemTable(Base):
    """Line items of an order, priced at the time of ordering."""
    __tablename__ = "order_items"

    id = Column(Identifier, primary_key=True, autoincrement=True)
    order_id = Column(Identifier, ForeignKey("orders.id"), nullable=False)
    product_id = Column(Identifier, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Money, nullable=False)

    __table_args__ = (
        Index("idx_order_items_order", "order_id"),
    )
