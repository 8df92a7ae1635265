"""
Pydantic records for users, the user summary projection and user filters
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime
import enum


class UserStatus(str, enum.Enum):
    """Filter value mapped onto the boolean ``active`` column"""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    @property
    def is_active(self) -> bool:
        return self is UserStatus.ACTIVE


class User(BaseModel):
    """A users row"""
    id: Optional[int] = None
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    active: bool = True
    age: Optional[int] = None
    department: Optional[str] = None
    created_date: Optional[datetime] = None
    last_modified: Optional[datetime] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "email": "john@example.com",
                "first_name": "John",
                "last_name": "Doe",
                "active": True,
                "age": 30,
                "department": "Engineering"
            }
        }


class UserSummary(BaseModel):
    """id, email and "first last" (read-only)"""
    id: int
    email: str
    full_name: str


class UserFilter(BaseModel):
    email: str
    status: UserStatus = UserStatus.ACTIVE
    min_age: int = 0
