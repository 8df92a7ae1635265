from decimal import Decimal
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.order_item_repository import OrderItemRepository
from repositories.order_repository import OrderRepository
from schemas.order import Order, OrderItem, OrderStatistics
from services.base import BaseService, transactional


class OrderService(BaseService):
    """Order and order item operations, one transaction per call."""

    def __init__(
        self,
        db_session: AsyncSession,
        repository: Optional[OrderRepository] = None,
        item_repository: Optional[OrderItemRepository] = None,
    ):
        super().__init__(db_session)
        self.repository = repository or OrderRepository(db_session)
        self.item_repository = item_repository or OrderItemRepository(db_session)

    @transactional
    async def get_all_orders(self) -> List[Order]:
        return await self.repository.find_all()

    @transactional
    async def get_order_by_id(self, order_id: int) -> Optional[Order]:
        return await self.repository.find_by_id(order_id)

    @transactional
    async def get_orders_by_customer_id(self, customer_id: int) -> List[Order]:
        return await self.repository.find_by_customer_id(customer_id)

    @transactional
    async def create_order(self, order: Order) -> int:
        return await self.repository.create_order(order)

    @transactional
    async def update_order_status(self, order_id: int, status: str) -> int:
        return await self.repository.update_order_status(order_id, status)

    @transactional
    async def get_orders_by_status(self, status: str) -> List[Order]:
        return await self.repository.find_by_status(status)

    @transactional
    async def calculate_total_revenue(self) -> Decimal:
        return await self.repository.calculate_total_revenue()

    @transactional
    async def get_order_statistics(self) -> OrderStatistics:
        return await self.repository.get_order_statistics()

    @transactional
    async def get_orders_above_amount(self, min_amount: Decimal) -> List[Order]:
        return await self.repository.find_orders_above_amount(min_amount)

    @transactional
    async def delete_order(self, order_id: int) -> int:
        return await self.repository.delete_order(order_id)

    @transactional
    async def count_orders_by_customer(self, customer_id: int) -> int:
        return await self.repository.count_orders_by_customer(customer_id)

    # ── ORDER ITEMS ───────────────────────────────────────

    @transactional
    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        return await self.item_repository.find_by_order_id(order_id)

    @transactional
    async def add_order_item(self, order_id: int, item: OrderItem) -> int:
        item.order_id = order_id
        return await self.item_repository.create_order_item(item)

    @transactional
    async def calculate_order_total(self, order_id: int) -> Decimal:
        return await self.item_repository.calculate_order_total(order_id)
