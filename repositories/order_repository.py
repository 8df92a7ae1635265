"""
Data access for the orders table and order-level aggregates
"""

from decimal import Decimal
from typing import List, Optional
import logging

from sqlalchemy.engine import Row

from models.base import COMPLETED_ORDER_STATUS
from repositories.base import BaseRepository
from schemas.money import to_money
from schemas.order import Order, OrderStatistics

logger = logging.getLogger(__name__)

_ORDER_COLUMNS = "id, customer_id, order_date, total_amount, status"


def _row_to_order(row: Row) -> Order:
    m = row._mapping
    return Order(
        id=m["id"],
        customer_id=m["customer_id"],
        order_date=m["order_date"],
        total_amount=m["total_amount"],
        status=m["status"],
    )


def _row_to_statistics(row: Row) -> OrderStatistics:
    m = row._mapping
    return OrderStatistics(
        total_orders=m["total_orders"],
        total_revenue=m["total_revenue"],
        average_order_value=m["average_order_value"],
        unique_customers=m["unique_customers"],
    )


def _money_column(row: Row) -> Decimal:
    return to_money(row[0])


class OrderRepository(BaseRepository):
    """Repository for CRUD and aggregate queries on orders."""

    # ── READ ──────────────────────────────────────────────

    async def find_all(self) -> List[Order]:
        """All orders, newest first."""
        return await (
            self.client.sql(
                f"""
                SELECT {_ORDER_COLUMNS}
                FROM orders
                ORDER BY order_date DESC, id DESC
                """
            )
            .query(_row_to_order)
            .list()
        )

    async def find_by_id(self, order_id: int) -> Optional[Order]:
        return await (
            self.client.sql(
                f"""
                SELECT {_ORDER_COLUMNS}
                FROM orders
                WHERE id = :id
                """
            )
            .param("id", order_id)
            .query(_row_to_order)
            .optional()
        )

    async def find_by_customer_id(self, customer_id: int) -> List[Order]:
        """A customer's orders, newest first."""
        return await (
            self.client.sql(
                f"""
                SELECT {_ORDER_COLUMNS}
                FROM orders
                WHERE customer_id = :customer_id
                ORDER BY order_date DESC, id DESC
                """
            )
            .param("customer_id", customer_id)
            .query(_row_to_order)
            .list()
        )

    async def find_by_status(self, status: str) -> List[Order]:
        """Orders with exactly this status, newest first."""
        return await (
            self.client.sql(
                f"""
                SELECT {_ORDER_COLUMNS}
                FROM orders
                WHERE status = :status
                ORDER BY order_date DESC, id DESC
                """
            )
            .param("status", status)
            .query(_row_to_order)
            .list()
        )

    async def find_orders_above_amount(self, min_amount: Decimal) -> List[Order]:
        """Orders strictly above ``min_amount``, largest first."""
        return await (
            self.client.sql(
                f"""
                SELECT {_ORDER_COLUMNS}
                FROM orders
                WHERE total_amount > :min_amount
                ORDER BY total_amount DESC
                """
            )
            .param("min_amount", min_amount)
            .query(_row_to_order)
            .list()
        )

    # ── CREATE / UPDATE / DELETE ──────────────────────────

    async def create_order(self, order: Order) -> int:
        """
        Insert an order; order_date is assigned by the database.

        Returns:
            The generated id.
        """
        order_id = await (
            self.client.sql(
                """
                INSERT INTO orders (customer_id, total_amount, status)
                VALUES (:customer_id, :total_amount, :status)
                RETURNING id
                """
            )
            .param("customer_id", order.customer_id)
            .param("total_amount", order.total_amount)
            .param("status", order.status)
            .update_returning_key()
        )
        logger.info(f"Created order #{order_id} for customer #{order.customer_id}")
        return order_id

    async def update_order_status(self, order_id: int, status: str) -> int:
        updated = await (
            self.client.sql(
                """
                UPDATE orders
                SET status = :status
                WHERE id = :order_id
                """
            )
            .param("status", status)
            .param("order_id", order_id)
            .update()
        )
        logger.info(f"Order #{order_id} status -> {status} ({updated} row(s))")
        return updated

    async def delete_order(self, order_id: int) -> int:
        deleted = await (
            self.client.sql("DELETE FROM orders WHERE id = :id")
            .param("id", order_id)
            .update()
        )
        logger.info(f"Deleted order #{order_id} ({deleted} row(s))")
        return deleted

    # ── AGGREGATES ────────────────────────────────────────

    async def calculate_total_revenue(self) -> Decimal:
        """Sum of COMPLETED orders; 0.00 when there are none."""
        return await (
            self.client.sql(
                """
                SELECT COALESCE(SUM(total_amount), 0)
                FROM orders
                WHERE status = :status
                """
            )
            .param("status", COMPLETED_ORDER_STATUS)
            .query(_money_column)
            .single()
        )

    async def get_order_statistics(self) -> OrderStatistics:
        return await (
            self.client.sql(
                """
                SELECT
                    COUNT(*) AS total_orders,
                    COALESCE(SUM(total_amount), 0) AS total_revenue,
                    COALESCE(AVG(total_amount), 0) AS average_order_value,
                    COUNT(DISTINCT customer_id) AS unique_customers
                FROM orders
                """
            )
            .query(_row_to_statistics)
            .single()
        )

    async def count_orders_by_customer(self, customer_id: int) -> int:
        return await (
            self.client.sql(
                """
                SELECT COUNT(*)
                FROM orders
                WHERE customer_id = :customer_id
                """
            )
            .param("customer_id", customer_id)
            .query()
            .single()
        )
