from decimal import Decimal
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from repositories.product_repository import ProductRepository
from schemas.product import Product
from services.base import BaseService, transactional


class ProductService(BaseService):
    """Product operations, one transaction per call."""

    def __init__(self, db_session: AsyncSession, repository: Optional[ProductRepository] = None):
        super().__init__(db_session)
        self.repository = repository or ProductRepository(db_session)

    @transactional
    async def get_all_products(self) -> List[Product]:
        return await self.repository.find_all()

    @transactional
    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return await self.repository.find_by_id(product_id)

    @transactional
    async def search_products(self, name: str) -> List[Product]:
        return await self.repository.find_by_name(name)

    @transactional
    async def get_low_stock_products(self, threshold: int) -> List[Product]:
        return await self.repository.find_low_stock(threshold)

    @transactional
    async def create_product(self, product: Product) -> int:
        return await self.repository.create_product(product)

    @transactional
    async def update_product(self, product: Product) -> int:
        return await self.repository.update_product(product)

    @transactional
    async def update_stock(self, product_id: int, quantity: int) -> int:
        return await self.repository.update_stock(product_id, quantity)

    @transactional
    async def delete_product(self, product_id: int) -> int:
        return await self.repository.delete_product(product_id)

    @transactional
    async def calculate_inventory_value(self) -> Decimal:
        return await self.repository.calculate_inventory_value()
