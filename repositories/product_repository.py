"""
Data access for the products table
"""

from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy.engine import Row

from repositories.base import BaseRepository
from schemas.money import to_money
from schemas.product import Product

logger = logging.getLogger(__name__)


def _row_to_product(row: Row) -> Product:
    m = row._mapping
    return Product(
        id=m["id"],
        name=m["name"],
        price=m["price"],
        stock_quantity=m["stock_quantity"],
    )


class ProductRepository(BaseRepository):
    """Repository for CRUD and inventory queries on products."""

    async def find_all(self) -> List[Product]:
        return await (
            self.client.sql(
                "SELECT id, name, price, stock_quantity FROM products ORDER BY name"
            )
            .query(_row_to_product)
            .list()
        )

    async def find_by_id(self, product_id: int) -> Optional[Product]:
        return await (
            self.client.sql(
                "SELECT id, name, price, stock_quantity FROM products WHERE id = :id"
            )
            .param("id", product_id)
            .query(_row_to_product)
            .optional()
        )

    async def find_by_name(self, fragment: str) -> List[Product]:
        return await (
            self.client.sql(
                """
                SELECT id, name, price, stock_quantity
                FROM products
                WHERE name LIKE :name
                ORDER BY name
                """
            )
            .param("name", f"%{fragment}%")
            .query(_row_to_product)
            .list()
        )

    async def find_low_stock(self, threshold: int) -> List[Product]:
        """Products with fewer than ``threshold`` units, scarcest first."""
        return await (
            self.client.sql(
                """
                SELECT id, name, price, stock_quantity
                FROM products
                WHERE stock_quantity < :threshold
                ORDER BY stock_quantity ASC, id
                """
            )
            .param("threshold", threshold)
            .query(_row_to_product)
            .list()
        )

    async def create_product(self, product: Product) -> int:
        product_id = await (
            self.client.sql(
                """
                INSERT INTO products (name, price, stock_quantity)
                VALUES (:name, :price, :stock_quantity)
                RETURNING id
                """
            )
            .param("name", product.name)
            .param("price", product.price)
            .param("stock_quantity", product.stock_quantity)
            .update_returning_key()
        )
        logger.info(f"Created product #{product_id} '{product.name}'")
        return product_id

    async def update_product(self, product: Product) -> int:
        """Overwrite name, price and stock of ``product.id``."""
        return await (
            self.client.sql(
                """
                UPDATE products
                SET name = :name, price = :price, stock_quantity = :stock_quantity
                WHERE id = :id
                """
            )
            .param("name", product.name)
            .param("price", product.price)
            .param("stock_quantity", product.stock_quantity)
            .param("id", product.id)
            .update()
        )

    async def update_stock(self, product_id: int, quantity: int) -> int:
        updated = await (
            self.client.sql("UPDATE products SET stock_quantity = :quantity WHERE id = :id")
            .param("quantity", quantity)
            .param("id", product_id)
            .update()
        )
        logger.info(f"Product #{product_id} stock -> {quantity} ({updated} row(s))")
        return updated

    async def delete_product(self, product_id: int) -> int:
        deleted = await (
            self.client.sql("DELETE FROM products WHERE id = :id")
            .param("id", product_id)
            .update()
        )
        logger.info(f"Deleted product #{product_id} ({deleted} row(s))")
        return deleted

    async def calculate_inventory_value(self) -> Decimal:
        """Sum of price * stock over all products; 0.00 for an empty catalogue."""
        return await (
            self.client.sql(
                "SELECT COALESCE(SUM(price * stock_quantity), 0) FROM products"
            )
            .query(lambda row: to_money(row[0]))
            .single()
        )
