"""
Order and order item endpoints
"""

from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List
from api.dependencies import get_order_service
from schemas.order import Order, OrderItem, OrderStatistics
from services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.get("", response_model=List[Order])
async def get_all_orders(service: OrderService = Depends(get_order_service)):
    """All orders, newest first."""
    return await service.get_all_orders()


@router.get("/customer/{customer_id}", response_model=List[Order])
async def get_orders_by_customer_id(customer_id: int, service: OrderService = Depends(get_order_service)):
    return await service.get_orders_by_customer_id(customer_id)


@router.get("/status/{order_status}", response_model=List[Order])
async def get_orders_by_status(order_status: str, service: OrderService = Depends(get_order_service)):
    """Orders with exactly this status, newest first."""
    return await service.get_orders_by_status(order_status)


@router.get("/revenue/total", response_model=Decimal)
async def get_total_revenue(service: OrderService = Depends(get_order_service)):
    """Revenue from COMPLETED orders."""
    return await service.calculate_total_revenue()


@router.get("/statistics", response_model=OrderStatistics)
async def get_order_statistics(service: OrderService = Depends(get_order_service)):
    return await service.get_order_statistics()


@router.get("/above-amount", response_model=List[Order])
async def get_orders_above_amount(
    min_amount: Decimal = Query(..., description="Exclusive lower bound on total_amount"),
    service: OrderService = Depends(get_order_service),
):
    return await service.get_orders_above_amount(min_amount)


@router.get("/count/customer/{customer_id}", response_model=int)
async def count_orders_by_customer(customer_id: int, service: OrderService = Depends(get_order_service)):
    return await service.count_orders_by_customer(customer_id)


@router.get("/{order_id}", response_model=Order)
async def get_order_by_id(order_id: int, service: OrderService = Depends(get_order_service)):
    order = await service.get_order_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
async def create_order(order: Order, service: OrderService = Depends(get_order_service)):
    """Create an order and return its generated id."""
    return await service.create_order(order)


@router.patch("/{order_id}/status", status_code=status.HTTP_200_OK)
async def update_order_status(
    order_id: int,
    order_status: str = Query(..., alias="status"),
    service: OrderService = Depends(get_order_service),
):
    await service.update_order_status(order_id, order_status)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    await service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ── Order items ───────────────────────────────────────────

@router.get("/{order_id}/items", response_model=List[OrderItem])
async def get_order_items(order_id: int, service: OrderService = Depends(get_order_service)):
    return await service.get_order_items(order_id)


@router.post("/{order_id}/items", response_model=int, status_code=status.HTTP_201_CREATED)
async def add_order_item(order_id: int, item: OrderItem, service: OrderService = Depends(get_order_service)):
    """Add a line item to the order; ``order_id`` in the body is ignored."""
    return await service.add_order_item(order_id, item)


@router.get("/{order_id}/items/total", response_model=Decimal)
async def get_order_items_total(order_id: int, service: OrderService = Depends(get_order_service)):
    return await service.calculate_order_total(order_id)
