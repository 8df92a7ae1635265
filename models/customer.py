from sqlalchemy import Column, String, DateTime, func, text
from models.base import Base, Identifier, DEFAULT_CUSTOMER_STATUS


class CustomerTable(Base):
    """
    Customers who place orders.

    Design:
    - email uniqueness is enforced by storage, not application code
    - status is a free-form string, defaulting to ACTIVE
    """
    __tablename__ = "customers"

    id = Column(Identifier, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, unique=True)
    status = Column(String(20), server_default=text(f"'{DEFAULT_CUSTOMER_STATUS}'"))
    created_at = Column(DateTime, server_default=func.current_timestamp())
