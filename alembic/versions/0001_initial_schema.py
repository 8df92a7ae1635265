"""
Initial schema - customers, products, orders, order_items and users tables.

Revision ID: 0001
Revises:
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "customers",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False, unique=True),
        sa.Column("status", sa.String(20), server_default=sa.text("'ACTIVE'")),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
    )
    op.create_table(
        "products",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), server_default=sa.text("0")),
    )
    op.create_table(
        "orders",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("customer_id", sa.BigInteger(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("order_date", sa.DateTime(), server_default=sa.func.current_timestamp()),
        sa.Column("total_amount", sa.Numeric(10, 2), server_default=sa.text("0.00")),
        sa.Column("status", sa.String(20), server_default=sa.text("'PENDING'")),
    )
    # Index on orders.customer_id for FK lookups
    op.create_index("idx_orders_customer", "orders", ["customer_id"])
    op.create_index("idx_orders_status_date", "orders", ["status", "order_date"])

    op.create_table(
        "order_items",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.BigInteger(), sa.ForeignKey("orders.id"), nullable=False),
        sa.Column("product_id", sa.BigInteger(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
    )
    op.create_index("idx_order_items_order", "order_items", ["order_id"])

    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(100), nullable=False, unique=True),
        sa.Column("first_name", sa.String(50)),
        sa.Column("last_name", sa.String(50)),
        sa.Column("active", sa.Boolean(), server_default=sa.true()),
        sa.Column("age", sa.Integer()),
        sa.Column("department", sa.String(50)),
        sa.Column("created_date", sa.DateTime(), server_default=sa.func.current_timestamp()),
        sa.Column("last_modified", sa.DateTime(), server_default=sa.func.current_timestamp()),
    )
    op.create_index("ix_users_department", "users", ["department"])


def downgrade():
    op.drop_table("users")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("products")
    op.drop_table("customers")
