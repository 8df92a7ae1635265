from sqlalchemy import Column, String, Integer, Boolean, DateTime, func, true
from models.base import Base, Identifier


class UserTable(Base):
    """
    Application users.

    last_modified has a server default only; every UPDATE statement in
    UserRepository sets it explicitly, since "ON UPDATE CURRENT_TIMESTAMP"
    is not portable.
    """
    __tablename__ = "users"

    id = Column(Identifier, primary_key=True, autoincrement=True)
    email = Column(String(100), nullable=False, unique=True)
    first_name = Column(String(50))
    last_name = Column(String(50))
    active = Column(Boolean, server_default=true())
    age = Column(Integer)
    department = Column(String(50), index=True)
    created_date = Column(DateTime, server_default=func.current_timestamp())
    last_modified = Column(DateTime, server_default=func.current_timestamp())
