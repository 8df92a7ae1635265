"""
Integration tests for product data access
"""

import pytest
from decimal import Decimal
from repositories.product_repository import ProductRepository
from schemas.product import Product


@pytest.mark.asyncio
async def test_create_then_find_by_id(db_session):
    repository = ProductRepository(db_session)

    product_id = await repository.create_product(Product(name="Webcam", price=Decimal("59.50"), stock_quantity=12))
    found = await repository.find_by_id(product_id)

    assert found == Product(id=product_id, name="Webcam", price=Decimal("59.50"), stock_quantity=12)


@pytest.mark.asyncio
async def test_find_missing_id_returns_none(db_session):
    assert await ProductRepository(db_session).find_by_id(999999) is None


@pytest.mark.asyncio
async def test_find_by_name_fragment(seeded_session):
    products = await ProductRepository(seeded_session).find_by_name("o")

    assert [p.name for p in products] == ["Keyboard", "Laptop", "Monitor", "Mouse"]


@pytest.mark.asyncio
async def test_low_stock_is_strictly_below_threshold(seeded_session):
    repository = ProductRepository(seeded_session)

    assert [p.name for p in await repository.find_low_stock(75)] == ["Laptop"]
    assert [p.name for p in await repository.find_low_stock(76)] == ["Laptop", "Monitor"]
    assert await repository.find_low_stock(10) == []


@pytest.mark.asyncio
async def test_update_product_and_stock(seeded_session):
    repository = ProductRepository(seeded_session)
    mouse = (await repository.find_by_name("Mouse"))[0]

    assert await repository.update_product(
        Product(id=mouse.id, name="Wireless Mouse", price=Decimal("34.99"), stock_quantity=180)
    ) == 1
    assert await repository.update_stock(mouse.id, 3) == 1

    found = await repository.find_by_id(mouse.id)
    assert (found.name, found.price, found.stock_quantity) == ("Wireless Mouse", Decimal("34.99"), 3)
    assert await repository.update_stock(999999, 3) == 0


@pytest.mark.asyncio
async def test_delete_counts(db_session):
    repository = ProductRepository(db_session)
    product_id = await repository.create_product(Product(name="Temp", price=Decimal("1.00")))

    assert await repository.delete_product(product_id) == 1
    assert await repository.delete_product(product_id) == 0


@pytest.mark.asyncio
async def test_inventory_value(seeded_session):
    value = await ProductRepository(seeded_session).calculate_inventory_value()

    # 999.99*50 + 29.99*200 + 79.99*150 + 299.99*75 + 9.99*500
    assert value == Decimal("95490.25")


@pytest.mark.asyncio
async def test_inventory_value_of_empty_catalogue_is_zero(db_session):
    assert await ProductRepository(db_session).calculate_inventory_value() == Decimal("0.00")
