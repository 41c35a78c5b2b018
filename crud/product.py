import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from exceptions import StoreError
from models.product import Product

logger = logging.getLogger(__name__)


async def _rollback(db: AsyncSession, message: str, error: SQLAlchemyError) -> StoreError:
    logger.exception(message)
    await db.rollback()
    return StoreError(message, details=str(error))


async def get_all_products(db: AsyncSession) -> List[Product]:
    try:
        result = await db.execute(
            select(Product).order_by(Product.created_at.desc(), Product.id.desc())
        )
        return result.scalars().all()
    except SQLAlchemyError as e:
        raise await _rollback(db, "Failed to fetch products", e)


async def get_product_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
    try:
        result = await db.execute(select(Product).where(Product.id == product_id))
        return result.scalars().first()
    except SQLAlchemyError as e:
        raise await _rollback(db, "Failed to fetch product", e)


async def create_product(db: AsyncSession, data: Dict[str, Any]) -> Product:
    product = Product(**data)
    try:
        db.add(product)
        await db.commit()
        await db.refresh(product)
    except SQLAlchemyError as e:
        raise await _rollback(db, "Failed to create product", e)
    return product


async def update_product(db: AsyncSession, product: Product, data: Dict[str, Any]) -> Product:
    try:
        for key, value in data.items():
            setattr(product, key, value)
        # force the UPDATE even when no column value changed
        product.updated_at = func.now()
        await db.commit()
        await db.refresh(product)
    except SQLAlchemyError as e:
        raise await _rollback(db, "Failed to update product", e)
    return product


async def delete_product(db: AsyncSession, product: Product) -> None:
    try:
        await db.delete(product)
        await db.commit()
    except SQLAlchemyError as e:
        raise await _rollback(db, "Failed to delete product", e)
