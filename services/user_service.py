from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.user_repository import UserRepository
from schemas.user import User, UserFilter, UserStatus, UserSummary
from services.base import BaseService, transactional


class UserService(BaseService):
    """User operations, one transaction per call."""

    def __init__(self, db_session: AsyncSession, repository: Optional[UserRepository] = None):
        super().__init__(db_session)
        self.repository = repository or UserRepository(db_session)

    @transactional
    async def get_all_users(self) -> List[User]:
        return await self.repository.find_all()

    @transactional
    async def get_active_users(self) -> List[User]:
        return await self.repository.find_active_users()

    @transactional
    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        return await self.repository.find_by_id(user_id)

    @transactional
    async def get_active_user_by_id(self, user_id: int) -> Optional[User]:
        return await self.repository.find_by_id_and_active(user_id)

    @transactional
    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self.repository.find_by_email(email)

    @transactional
    async def get_user_by_email_and_status(self, email: str, status: UserStatus) -> Optional[User]:
        return await self.repository.find_by_email_and_status(email, status)

    @transactional
    async def filter_users(self, user_filter: UserFilter) -> List[User]:
        return await self.repository.find_by_filter(user_filter)

    @transactional
    async def get_users_by_age_range(self, min_age: int, max_age: int) -> List[User]:
        return await self.repository.find_users_by_age_range(min_age, max_age)

    @transactional
    async def get_user_summaries(self) -> List[UserSummary]:
        return await self.repository.get_user_summaries()

    @transactional
    async def get_users_by_department(self) -> Dict[Optional[str], List[User]]:
        return await self.repository.get_users_by_department()

    @transactional
    async def count_active_users(self) -> int:
        return await self.repository.count_active_users_via_stream()

    @transactional
    async def create_user(self, user: User) -> int:
        return await self.repository.insert_with_generated_keys(user)

    @transactional
    async def save_user(self, user: User) -> User:
        return await self.repository.save(user)

    @transactional
    async def update_email(self, user_id: int, email: str) -> int:
        return await self.repository.update_email(user_id, email)

    @transactional
    async def delete_user(self, user_id: int) -> int:
        return await self.repository.delete_by_id(user_id)

    @transactional
    async def purge_inactive_users(self, created_before: datetime) -> int:
        return await self.repository.delete_inactive_old_users(created_before)
