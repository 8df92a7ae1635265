"""
Product endpoints
"""

from decimal import Decimal
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List
from api.dependencies import get_product_service
from core.config import settings
from schemas.product import Product
from services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=List[Product])
async def get_all_products(service: ProductService = Depends(get_product_service)):
    return await service.get_all_products()


@router.get("/search", response_model=List[Product])
async def search_products(
    name: str = Query(..., description="Substring of the product name"),
    service: ProductService = Depends(get_product_service),
):
    return await service.search_products(name)


@router.get("/low-stock", response_model=List[Product])
async def get_low_stock_products(
    threshold: int = Query(settings.LOW_STOCK_DEFAULT_THRESHOLD, description="Stock strictly below this"),
    service: ProductService = Depends(get_product_service),
):
    return await service.get_low_stock_products(threshold)


@router.get("/inventory/value", response_model=Decimal)
async def get_inventory_value(service: ProductService = Depends(get_product_service)):
    return await service.calculate_inventory_value()


@router.get("/{product_id}", response_model=Product)
async def get_product_by_id(product_id: int, service: ProductService = Depends(get_product_service)):
    product = await service.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
async def create_product(product: Product, service: ProductService = Depends(get_product_service)):
    return await service.create_product(product)


@router.put("/{product_id}", status_code=status.HTTP_200_OK)
async def update_product(
    product_id: int,
    product: Product,
    service: ProductService = Depends(get_product_service),
):
    product.id = product_id
    await service.update_product(product)
    return Response(status_code=status.HTTP_200_OK)


@router.patch("/{product_id}/stock", status_code=status.HTTP_200_OK)
async def update_stock(
    product_id: int,
    quantity: int = Query(...),
    service: ProductService = Depends(get_product_service),
):
    await service.update_stock(product_id, quantity)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
