"""Product operations: validation, then one store call, then the result."""
import logging
from typing import Any, Dict, List, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from crud import product as product_crud
from exceptions import NotFoundError, ValidationError
from models.product import Product
from schemas import InventoryStats
from utils.stats import compute_inventory_stats
from utils.validation import PRODUCT_FIELDS, apply_defaults, validate_product

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Product deleted successfully"


def _current_fields(product: Product) -> Dict[str, Any]:
    return {field: getattr(product, field) for field in PRODUCT_FIELDS}


async def list_products(db: AsyncSession) -> List[Product]:
    return await product_crud.get_all_products(db)


async def create_product(db: AsyncSession, payload: Any) -> Product:
    errors = validate_product(payload)
    if errors:
        logger.warning(f"Rejected new product: {errors}")
        raise ValidationError(errors)

    product = await product_crud.create_product(db, apply_defaults(payload))
    logger.info(f"Created product {product.id} ({product.name})")
    return product


async def update_product(db: AsyncSession, product_id: int, payload: Any) -> Product:
    product = await product_crud.get_product_by_id(db, product_id)
    if product is None:
        raise NotFoundError(product_id)

    if not isinstance(payload, Mapping):
        raise ValidationError(validate_product(payload))

    # partial updates are checked against the record they would produce
    merged = {**_current_fields(product), **{k: v for k, v in payload.items() if k in PRODUCT_FIELDS}}
    errors = validate_product(merged)
    if errors:
        logger.warning(f"Rejected update of product {product_id}: {errors}")
        raise ValidationError(errors)

    product = await product_crud.update_product(db, product, apply_defaults(payload, partial=True))
    logger.info(f"Updated product {product.id}")
    return product


async def delete_product(db: AsyncSession, product_id: int) -> str:
    product = await product_crud.get_product_by_id(db, product_id)
    if product is None:
        raise NotFoundError(product_id)

    await product_crud.delete_product(db, product)
    logger.info(f"Deleted product {product_id}")
    return DELETED_MESSAGE


async def get_inventory_stats(db: AsyncSession) -> InventoryStats:
    products = await product_crud.get_all_products(db)
    return compute_inventory_stats(products)
