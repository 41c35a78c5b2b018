from typing import Any, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas import (
    ProductResponse, MessageResponse, InventoryStats,
    ErrorResponse, ValidationErrorResponse
)
from services import product as product_service

router = APIRouter(tags=["Products"], prefix="/products")

VALIDATION_RESPONSE = {400: {"model": ValidationErrorResponse}}
NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse}}


@router.get("", response_model=List[ProductResponse])
async def list_products(db: AsyncSession = Depends(get_db)):
    """All products, newest first"""
    return await product_service.list_products(db)


@router.get("/stats", response_model=InventoryStats)
async def get_stats(db: AsyncSession = Depends(get_db)):
    """Summary counts over the whole inventory"""
    return await product_service.get_inventory_stats(db)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSE,
)
async def create_product(
        payload: Any = Body(...),
        db: AsyncSession = Depends(get_db)
):
    return await product_service.create_product(db, payload)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**VALIDATION_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def update_product(
        product_id: int,
        payload: Any = Body(...),
        db: AsyncSession = Depends(get_db)
):
    return await product_service.update_product(db, product_id, payload)


@router.delete("/{product_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSE)
async def delete_product(product_id: int, db: AsyncSession = Depends(get_db)):
    message = await product_service.delete_product(db, product_id)
    return {"message": message}
