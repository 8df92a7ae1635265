"""
Data access for the users table.

Besides plain CRUD this repository shows the less common shapes of the SQL
client: a custom projection (``get_user_summaries``), a whole-result extractor
(``get_users_by_department``), streaming (``count_active_users_via_stream``)
and SQL kept as a module constant (``FIND_BY_EMAIL``).
"""

from collections import OrderedDict
from datetime import datetime
from typing import Dict, Iterable, List, Optional
import logging

from sqlalchemy.engine import Row

from repositories.base import BaseRepository
from schemas.user import User, UserFilter, UserStatus, UserSummary

logger = logging.getLogger(__name__)

_USER_COLUMNS = (
    "id, email, first_name, last_name, active, age, department, created_date, last_modified"
)

FIND_BY_EMAIL = f"""
    SELECT {_USER_COLUMNS}
    FROM users
    WHERE email = :email
"""


def _row_to_user(row: Row) -> User:
    m = row._mapping
    return User(
        id=m["id"],
        email=m["email"],
        first_name=m["first_name"],
        last_name=m["last_name"],
        active=bool(m["active"]),
        age=m["age"],
        department=m["department"],
        created_date=m["created_date"],
        last_modified=m["last_modified"],
    )


def _row_to_summary(row: Row) -> UserSummary:
    m = row._mapping
    return UserSummary(id=m["id"], email=m["email"], full_name=m["full_name"])


def _group_by_department(users: Iterable[User]) -> Dict[Optional[str], List[User]]:
    grouped: Dict[Optional[str], List[User]] = OrderedDict()
    for user in users:
        grouped.setdefault(user.department, []).append(user)
    return grouped


class UserRepository(BaseRepository):
    """Repository for users."""

    # ── BASIC QUERIES ─────────────────────────────────────

    async def find_active_users(self) -> List[User]:
        return await (
            self.client.sql(f"SELECT {_USER_COLUMNS} FROM users WHERE active = :active")
            .param("active", True)
            .query(_row_to_user)
            .list()
        )

    async def find_by_id_and_active(self, user_id: int) -> Optional[User]:
        """The user, if it exists and is active."""
        return await (
            self.client.sql(
                f"SELECT {_USER_COLUMNS} FROM users WHERE id = :id AND active = :active"
            )
            .param("id", user_id)
            .param("active", True)
            .query(_row_to_user)
            .optional()
        )

    async def find_by_email_and_status(self, email: str, status: UserStatus) -> Optional[User]:
        return await (
            self.client.sql(
                f"SELECT {_USER_COLUMNS} FROM users WHERE email = :email AND active = :active"
            )
            .param("email", email)
            .param("active", status.is_active)
            .query(_row_to_user)
            .optional()
        )

    async def find_by_filter(self, user_filter: UserFilter) -> List[User]:
        """Users matching email and status exactly, aged at least ``min_age``."""
        return await (
            self.client.sql(
                f"""
                SELECT {_USER_COLUMNS}
                FROM users
                WHERE email = :email AND active = :active AND age >= :min_age
                """
            )
            .params({
                "email": user_filter.email,
                "active": user_filter.status.is_active,
                "min_age": user_filter.min_age,
            })
            .query(_row_to_user)
            .list()
        )

    async def find_by_id(self, user_id: int) -> Optional[User]:
        return await (
            self.client.sql(f"SELECT {_USER_COLUMNS} FROM users WHERE id = :id")
            .param("id", user_id)
            .query(_row_to_user)
            .optional()
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        return await (
            self.client.sql(FIND_BY_EMAIL)
            .param("email", email)
            .query(_row_to_user)
            .optional()
        )

    async def find_all(self) -> List[User]:
        """All users ordered by last name, then first name."""
        return await (
            self.client.sql(
                f"SELECT {_USER_COLUMNS} FROM users ORDER BY last_name, first_name"
            )
            .query(_row_to_user)
            .list()
        )

    async def find_users_by_age_range(self, min_age: int, max_age: int) -> List[User]:
        """Users with min_age <= age <= max_age."""
        return await (
            self.client.sql(
                f"SELECT {_USER_COLUMNS} FROM users WHERE age BETWEEN :min_age AND :max_age"
            )
            .param("min_age", min_age)
            .param("max_age", max_age)
            .query(_row_to_user)
            .list()
        )

    # ── PROJECTIONS / EXTRACTORS ──────────────────────────

    async def get_user_summaries(self) -> List[UserSummary]:
        return await (
            self.client.sql(
                """
                SELECT
                    id,
                    email,
                    TRIM(COALESCE(first_name, '') || ' ' || COALESCE(last_name, '')) AS full_name
                FROM users
                """
            )
            .query(_row_to_summary)
            .list()
        )

    async def get_users_by_department(self) -> Dict[Optional[str], List[User]]:
        return await (
            self.client.sql(f"SELECT {_USER_COLUMNS} FROM users ORDER BY department, id")
            .query(_row_to_user)
            .extract(_group_by_department)
        )

    async def count_active_users_via_stream(self) -> int:
        """Count active users by streaming every row through Python."""
        count = 0
        stream = (
            self.client.sql(f"SELECT {_USER_COLUMNS} FROM users")
            .query(_row_to_user)
            .stream()
        )
        async for user in stream:
            if user.active:
                count += 1
        return count

    # ── INSERT ────────────────────────────────────────────

    async def insert_simple(self, user: User) -> int:
        """Insert without reading back the key; returns rows inserted."""
        inserted = await (
            self.client.sql(
                """
                INSERT INTO users (email, first_name, last_name, active)
                VALUES (:email, :first_name, :last_name, :active)
                """
            )
            .param("email", user.email)
            .param("first_name", user.first_name)
            .param("last_name", user.last_name)
            .param("active", user.active)
            .update()
        )
        logger.info(f"Inserted user <{user.email}>")
        return inserted

    async def insert_with_generated_keys(self, user: User) -> int:
        """Insert email and names, binding them straight from the record."""
        user_id = await (
            self.client.sql(
                """
                INSERT INTO users (email, first_name, last_name)
                VALUES (:email, :first_name, :last_name)
                RETURNING id
                """
            )
            .params(user.dict(include={"email", "first_name", "last_name"}))
            .update_returning_key()
        )
        logger.info(f"Inserted user #{user_id} <{user.email}>")
        return user_id

    # ── UPDATE / DELETE ───────────────────────────────────

    async def update_email(self, user_id: int, new_email: str) -> int:
        return await (
            self.client.sql(
                "UPDATE users SET email = :email, last_modified = :last_modified WHERE id = :id"
            )
            .param("email", new_email)
            .param("last_modified", datetime.utcnow())
            .param("id", user_id)
            .update()
        )

    async def delete_inactive_old_users(self, cutoff_date: datetime) -> int:
        """Delete inactive users created before ``cutoff_date``."""
        deleted = await (
            self.client.sql(
                "DELETE FROM users WHERE active = :active AND created_date < :cutoff_date"
            )
            .param("active", False)
            .param("cutoff_date", cutoff_date)
            .update()
        )
        logger.info(f"Purged {deleted} inactive user(s) created before {cutoff_date:%Y-%m-%d}")
        return deleted

    async def delete_by_id(self, user_id: int) -> int:
        return await (
            self.client.sql("DELETE FROM users WHERE id = :id")
            .param("id", user_id)
            .update()
        )

    # ── SAVE ──────────────────────────────────────────────

    async def save(self, user: User) -> User:
        """Insert when ``user.id`` is None, otherwise update. Returns ``user``."""
        if user.id is None:
            return await self._insert(user)
        return await self._update(user)

    async def _insert(self, user: User) -> User:
        now = datetime.utcnow()
        user.id = await (
            self.client.sql(
                """
                INSERT INTO users (email, first_name, last_name, active, age, department, created_date, last_modified)
                VALUES (:email, :first_name, :last_name, :active, :age, :department, :created_date, :last_modified)
                RETURNING id
                """
            )
            .param("email", user.email)
            .param("first_name", user.first_name)
            .param("last_name", user.last_name)
            .param("active", user.active)
            .param("age", user.age)
            .param("department", user.department)
            .param("created_date", now)
            .param("last_modified", now)
            .update_returning_key()
        )
        user.created_date = now
        user.last_modified = now
        logger.info(f"Saved new user #{user.id} <{user.email}>")
        return user

    async def _update(self, user: User) -> User:
        now = datetime.utcnow()
        await (
            self.client.sql(
                """
                UPDATE users
                SET email = :email, first_name = :first_name, last_name = :last_name,
                    active = :active, age = :age, department = :department,
                    last_modified = :last_modified
                WHERE id = :id
                """
            )
            .param("email", user.email)
            .param("first_name", user.first_name)
            .param("last_name", user.last_name)
            .param("active", user.active)
            .param("age", user.age)
            .param("department", user.department)
            .param("last_modified", now)
            .param("id", user.id)
            .update()
        )
        user.last_modified = now
        logger.info(f"Saved user #{user.id} <{user.email}>")
        return user
