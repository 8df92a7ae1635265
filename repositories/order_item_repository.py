"""
Data access for order line items
"""

from decimal import Decimal
from typing import List
import logging

from sqlalchemy.engine import Row

from repositories.base import BaseRepository
from schemas.money import to_money
from schemas.order import OrderItem

logger = logging.getLogger(__name__)


def _row_to_item(row: Row) -> OrderItem:
    m = row._mapping
    return OrderItem(
        id=m["id"],
        order_id=m["order_id"],
        product_id=m["product_id"],
        quantity=m["quantity"],
        unit_price=m["unit_price"],
    )


class OrderItemRepository(BaseRepository):
    """Repository for the order_items table."""

    async def find_by_order_id(self, order_id: int) -> List[OrderItem]:
        return await (
            self.client.sql(
                """
                SELECT id, order_id, product_id, quantity, unit_price
                FROM order_items
                WHERE order_id = :order_id
                ORDER BY id
                """
            )
            .param("order_id", order_id)
            .query(_row_to_item)
            .list()
        )

    async def create_order_item(self, item: OrderItem) -> int:
        item_id = await (
            self.client.sql(
                """
                INSERT INTO order_items (order_id, product_id, quantity, unit_price)
                VALUES (:order_id, :product_id, :quantity, :unit_price)
                RETURNING id
                """
            )
            .param("order_id", item.order_id)
            .param("product_id", item.product_id)
            .param("quantity", item.quantity)
            .param("unit_price", item.unit_price)
            .update_returning_key()
        )
        logger.info(f"Added item #{item_id} (product #{item.product_id} x{item.quantity}) to order #{item.order_id}")
        return item_id

    async def delete_order_item(self, item_id: int) -> int:
        return await (
            self.client.sql("DELETE FROM order_items WHERE id = :id")
            .param("id", item_id)
            .update()
        )

    async def calculate_order_total(self, order_id: int) -> Decimal:
        """Sum of quantity * unit_price over the order's items; 0.00 when empty."""
        return await (
            self.client.sql(
                """
                SELECT COALESCE(SUM(quantity * unit_price), 0)
                FROM order_items
                WHERE order_id = :order_id
                """
            )
            .param("order_id", order_id)
            .query(lambda row: to_money(row[0]))
            .single()
        )
