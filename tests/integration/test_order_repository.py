"""
Integration tests for order and order item data access
"""

import pytest
from decimal import Decimal
from core.exceptions import ConstraintViolationError
from repositories.customer_repository import CustomerRepository
from repositories.order_item_repository import OrderItemRepository
from repositories.order_repository import OrderRepository
from schemas.customer import Customer
from schemas.order import Order, OrderItem


async def _customer_id(session, email="john.doe@example.com"):
    customer = await CustomerRepository(session).find_by_email(email)
    return customer.id


@pytest.mark.asyncio
async def test_create_then_find_by_id(seeded_session):
    repository = OrderRepository(seeded_session)
    customer_id = await _customer_id(seeded_session)

    order_id = await repository.create_order(
        Order(customer_id=customer_id, total_amount=Decimal("149.99"), status="PENDING")
    )
    found = await repository.find_by_id(order_id)

    assert found.customer_id == customer_id
    assert found.total_amount == Decimal("149.99")
    assert found.status == "PENDING"
    assert found.order_date is not None


@pytest.mark.asyncio
async def test_order_for_unknown_customer_is_rejected(db_session):
    with pytest.raises(ConstraintViolationError):
        await OrderRepository(db_session).create_order(Order(customer_id=424242))


@pytest.mark.asyncio
async def test_find_missing_id_returns_none(db_session):
    assert await OrderRepository(db_session).find_by_id(999999) is None


@pytest.mark.asyncio
async def test_find_all_newest_first(seeded_session):
    orders = await OrderRepository(seeded_session).find_all()

    assert len(orders) == 5
    dates = [o.order_date for o in orders]
    assert dates == sorted(dates, reverse=True)


@pytest.mark.asyncio
async def test_pending_orders_only_pending_newest_first(seeded_session):
    orders = await OrderRepository(seeded_session).find_by_status("PENDING")

    assert len(orders) == 2
    assert all(o.status == "PENDING" for o in orders)
    assert orders[0].order_date > orders[1].order_date
    assert orders[0].total_amount == Decimal("39.98")


@pytest.mark.asyncio
async def test_find_by_customer_id(seeded_session):
    customer_id = await _customer_id(seeded_session)

    orders = await OrderRepository(seeded_session).find_by_customer_id(customer_id)

    assert [o.status for o in orders] == ["SHIPPED", "COMPLETED"]


@pytest.mark.asyncio
async def test_update_status_and_delete(db_session):
    customer_id = await CustomerRepository(db_session).create_customer(
        Customer(name="Order Holder", email="holder@example.com")
    )
    repository = OrderRepository(db_session)
    order_id = await repository.create_order(Order(customer_id=customer_id))

    assert await repository.update_order_status(order_id, "SHIPPED") == 1
    assert (await repository.find_by_id(order_id)).status == "SHIPPED"
    assert await repository.update_order_status(999999, "SHIPPED") == 0

    assert await repository.delete_order(order_id) == 1
    assert await repository.find_by_id(order_id) is None
    assert await repository.delete_order(order_id) == 0


@pytest.mark.asyncio
async def test_total_revenue_counts_completed_only(seeded_session):
    revenue = await OrderRepository(seeded_session).calculate_total_revenue()

    assert revenue == Decimal("1499.94")


@pytest.mark.asyncio
async def test_statistics(seeded_session):
    stats = await OrderRepository(seeded_session).get_order_statistics()

    assert stats.total_orders == 5
    assert stats.total_revenue == Decimal("1919.90")
    assert stats.average_order_value == Decimal("383.98")
    assert stats.unique_customers == 4


@pytest.mark.asyncio
async def test_aggregates_on_empty_tables_are_zero(db_session):
    repository = OrderRepository(db_session)

    assert await repository.calculate_total_revenue() == Decimal("0.00")
    stats = await repository.get_order_statistics()
    assert stats.total_orders == 0
    assert stats.total_revenue == Decimal("0.00")
    assert stats.average_order_value == Decimal("0.00")
    assert stats.unique_customers == 0
    assert await repository.count_orders_by_customer(1) == 0
    assert await OrderItemRepository(db_session).calculate_order_total(1) == Decimal("0.00")


@pytest.mark.asyncio
async def test_orders_above_amount_is_exclusive(seeded_session):
    orders = await OrderRepository(seeded_session).find_orders_above_amount(Decimal("299.99"))

    assert [o.total_amount for o in orders] == [Decimal("1109.97"), Decimal("389.97")]


@pytest.mark.asyncio
async def test_count_orders_by_customer(seeded_session):
    customer_id = await _customer_id(seeded_session)

    assert await OrderRepository(seeded_session).count_orders_by_customer(customer_id) == 2


@pytest.mark.asyncio
async def test_order_items_and_total(seeded_session):
    orders = OrderRepository(seeded_session)
    items = OrderItemRepository(seeded_session)
    first_order = (await orders.find_by_status("COMPLETED"))[-1]

    lines = await items.find_by_order_id(first_order.id)

    assert len(lines) == 3
    assert await items.calculate_order_total(first_order.id) == Decimal("1109.90")

    item_id = await items.create_order_item(
        OrderItem(order_id=first_order.id, product_id=lines[0].product_id, quantity=2, unit_price=Decimal("5.00"))
    )
    assert await items.calculate_order_total(first_order.id) == Decimal("1119.90")
    assert await items.delete_order_item(item_id) == 1
    assert await items.delete_order_item(item_id) == 0
