"""
Data access for the customers table, plus customer-level reports over orders
"""

from typing import List, Optional
import logging

from sqlalchemy.engine import Row

from models.base import ACTIVE_CUSTOMER_STATUS
from repositories.base import BaseRepository
from schemas.customer import Customer, CustomerSummary

logger = logging.getLogger(__name__)

_INSERT_CUSTOMER = """
    INSERT INTO customers (name, email, status)
    VALUES (:name, :email, :status)
"""


def _row_to_customer(row: Row) -> Customer:
    m = row._mapping
    return Customer(
        id=m["id"],
        name=m["name"],
        email=m["email"],
        status=m["status"],
        created_at=m["created_at"],
    )


def _row_to_summary(row: Row) -> CustomerSummary:
    m = row._mapping
    return CustomerSummary(
        id=m["id"],
        name=m["name"],
        email=m["email"],
        order_count=m["order_count"],
        total_spent=m["total_spent"],
    )


def _customer_params(customer: Customer) -> dict:
    return {
        "name": customer.name,
        "email": customer.email,
        "status": customer.status,
    }


class CustomerRepository(BaseRepository):
    """Repository for CRUD and report queries on customers."""

    # ── READ ──────────────────────────────────────────────

    async def find_all(self) -> List[Customer]:
        """All customers, in storage order."""
        return await (
            self.client.sql("SELECT id, name, email, status, created_at FROM customers")
            .query(_row_to_customer)
            .list()
        )

    async def find_by_id(self, customer_id: int) -> Optional[Customer]:
        return await (
            self.client.sql(
                "SELECT id, name, email, status, created_at FROM customers WHERE id = :id"
            )
            .param("id", customer_id)
            .query(_row_to_customer)
            .optional()
        )

    async def find_by_name_and_status(self, name: str, status: str) -> List[Customer]:
        """
        Customers whose name contains ``name`` and whose status equals ``status``.
        """
        return await (
            self.client.sql(
                """
                SELECT id, name, email, status, created_at
                FROM customers
                WHERE name LIKE :name AND status = :status
                """
            )
            .param("name", f"%{name}%")
            .param("status", status)
            .query(_row_to_customer)
            .list()
        )

    async def find_by_email(self, email: str) -> Optional[Customer]:
        return await (
            self.client.sql(
                """
                SELECT id, name, email, status, created_at
                FROM customers
                WHERE email = :email
                """
            )
            .params({"email": email})
            .query(_row_to_customer)
            .optional()
        )

    # ── CREATE / UPDATE / DELETE ──────────────────────────

    async def create_customer(self, customer: Customer) -> int:
        """
        Insert a customer.

        Returns:
            The generated id. ``customer.id`` is ignored.
        """
        customer_id = await (
            self.client.sql(_INSERT_CUSTOMER + " RETURNING id")
            .params(_customer_params(customer))
            .update_returning_key()
        )
        logger.info(f"Created customer #{customer_id} <{customer.email}>")
        return customer_id

    async def update_customer(self, customer: Customer) -> int:
        """Overwrite name, email and status of ``customer.id``; returns rows updated."""
        updated = await (
            self.client.sql(
                """
                UPDATE customers
                SET name = :name, email = :email, status = :status
                WHERE id = :id
                """
            )
            .params(_customer_params(customer))
            .param("id", customer.id)
            .update()
        )
        logger.info(f"Updated customer #{customer.id} ({updated} row(s))")
        return updated

    async def delete_customer(self, customer_id: int) -> int:
        deleted = await (
            self.client.sql("DELETE FROM customers WHERE id = :id")
            .param("id", customer_id)
            .update()
        )
        logger.info(f"Deleted customer #{customer_id} ({deleted} row(s))")
        return deleted

    async def create_customers_batch(self, customers: List[Customer]) -> int:
        """
        Insert customers one statement at a time.

        A failing insert stops the loop and propagates; rows inserted before
        it stay in the current transaction.

        Returns:
            Number of customers inserted.
        """
        inserted = 0
        for customer in customers:
            await (
                self.client.sql(_INSERT_CUSTOMER)
                .params(_customer_params(customer))
                .update()
            )
            inserted += 1
        logger.info(f"Batch inserted {inserted} customers")
        return inserted

    # ── REPORTS ───────────────────────────────────────────

    async def find_customer_summaries(self) -> List[CustomerSummary]:
        """Order count and total spent per customer, biggest spenders first."""
        return await (
            self.client.sql(
                """
                SELECT
                    c.id,
                    c.name,
                    c.email,
                    COUNT(o.id) AS order_count,
                    COALESCE(SUM(o.total_amount), 0) AS total_spent
                FROM customers c
                LEFT JOIN orders o ON c.id = o.customer_id
                GROUP BY c.id, c.name, c.email
                ORDER BY total_spent DESC, c.id
                """
            )
            .query(_row_to_summary)
            .list()
        )

    async def count_by_status(self, status: str) -> int:
        return await (
            self.client.sql("SELECT COUNT(*) FROM customers WHERE status = :status")
            .param("status", status)
            .query()
            .single()
        )

    async def find_customers_with_no_orders(self) -> List[Customer]:
        return await (
            self.client.sql(
                """
                SELECT c.id, c.name, c.email, c.status, c.created_at
                FROM customers c
                LEFT JOIN orders o ON c.id = o.customer_id
                WHERE o.id IS NULL
                """
            )
            .query(_row_to_customer)
            .list()
        )

    async def find_top_active_customers(self, limit: int) -> List[Customer]:
        """Active customers with the most orders, at most ``limit`` of them."""
        return await (
            self.client.sql(
                """
                SELECT c.id, c.name, c.email, c.status, c.created_at
                FROM customers c
                LEFT JOIN orders o ON c.id = o.customer_id
                WHERE c.status = :status
                GROUP BY c.id, c.name, c.email, c.status, c.created_at
                ORDER BY COUNT(o.id) DESC
                LIMIT :limit
                """
            )
            .param("status", ACTIVE_CUSTOMER_STATUS)
            .param("limit", limit)
            .query(_row_to_customer)
            .list()
        )
