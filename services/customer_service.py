from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from models.base import ACTIVE_CUSTOMER_STATUS
from repositories.customer_repository import CustomerRepository
from schemas.customer import Customer, CustomerSummary
from services.base import BaseService, transactional


class CustomerService(BaseService):
    """Customer operations, one transaction per call."""

    def __init__(self, db_session: AsyncSession, repository: Optional[CustomerRepository] = None):
        super().__init__(db_session)
        self.repository = repository or CustomerRepository(db_session)

    @transactional
    async def get_all_customers(self) -> List[Customer]:
        return await self.repository.find_all()

    @transactional
    async def get_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        return await self.repository.find_by_id(customer_id)

    @transactional
    async def search_customers(self, name: str, status: str) -> List[Customer]:
        return await self.repository.find_by_name_and_status(name, status)

    @transactional
    async def get_customer_by_email(self, email: str) -> Optional[Customer]:
        return await self.repository.find_by_email(email)

    @transactional
    async def create_customer(self, customer: Customer) -> int:
        return await self.repository.create_customer(customer)

    @transactional
    async def update_customer(self, customer: Customer) -> int:
        return await self.repository.update_customer(customer)

    @transactional
    async def delete_customer(self, customer_id: int) -> int:
        return await self.repository.delete_customer(customer_id)

    @transactional
    async def create_customers_batch(self, customers: List[Customer]) -> int:
        """All-or-nothing: one failing insert rolls back the whole batch."""
        return await self.repository.create_customers_batch(customers)

    @transactional
    async def get_customer_summaries(self) -> List[CustomerSummary]:
        return await self.repository.find_customer_summaries()

    @transactional
    async def count_active_customers(self) -> int:
        return await self.repository.count_by_status(ACTIVE_CUSTOMER_STATUS)

    @transactional
    async def get_customers_with_no_orders(self) -> List[Customer]:
        return await self.repository.find_customers_with_no_orders()

    @transactional
    async def get_top_active_customers(self, limit: int) -> List[Customer]:
        return await self.repository.find_top_active_customers(limit)
