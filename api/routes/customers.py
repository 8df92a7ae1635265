"""
Customer endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List
from api.dependencies import get_customer_service
from core.config import settings
from schemas.customer import Customer, CustomerSummary
from services.customer_service import CustomerService
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/customers", tags=["Customers"])


@router.get("", response_model=List[Customer])
async def get_all_customers(service: CustomerService = Depends(get_customer_service)):
    return await service.get_all_customers()


# Fixed paths are declared before "/{customer_id}" so they are not parsed as ids

@router.get("/search", response_model=List[Customer])
async def search_customers(
    name: str = Query(..., description="Substring of the customer name"),
    status: str = Query(..., description="Exact status, e.g. ACTIVE"),
    service: CustomerService = Depends(get_customer_service),
):
    return await service.search_customers(name, status)


@router.get("/summaries", response_model=List[CustomerSummary])
async def get_customer_summaries(service: CustomerService = Depends(get_customer_service)):
    """Order count and total spent per customer, biggest spenders first."""
    return await service.get_customer_summaries()


@router.get("/count/active", response_model=int)
async def count_active_customers(service: CustomerService = Depends(get_customer_service)):
    return await service.count_active_customers()


@router.get("/no-orders", response_model=List[Customer])
async def get_customers_with_no_orders(service: CustomerService = Depends(get_customer_service)):
    return await service.get_customers_with_no_orders()


@router.get("/top-active", response_model=List[Customer])
async def get_top_active_customers(
    limit: int = Query(settings.TOP_ACTIVE_DEFAULT_LIMIT, ge=0, description="Maximum customers to return"),
    service: CustomerService = Depends(get_customer_service),
):
    return await service.get_top_active_customers(limit)


@router.get("/email/{email}", response_model=Customer)
async def get_customer_by_email(email: str, service: CustomerService = Depends(get_customer_service)):
    customer = await service.get_customer_by_email(email)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.post("/batch", status_code=status.HTTP_201_CREATED)
async def create_customers_batch(
    customers: List[Customer],
    service: CustomerService = Depends(get_customer_service),
):
    count = await service.create_customers_batch(customers)
    logger.info(f"POST /api/customers/batch created {count} customers")
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer_by_id(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    customer = await service.get_customer_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
async def create_customer(customer: Customer, service: CustomerService = Depends(get_customer_service)):
    """Create a customer and return its generated id."""
    return await service.create_customer(customer)


@router.put("/{customer_id}", status_code=status.HTTP_200_OK)
async def update_customer(
    customer_id: int,
    customer: Customer,
    service: CustomerService = Depends(get_customer_service),
):
    """Overwrite name, email and status; fields left out fall back to their defaults."""
    customer.id = customer_id
    await service.update_customer(customer)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
