#!/usr/bin/env python3
"""
Resets the products table and fills it with demo inventory.

Run after `alembic upgrade head`; the table must already exist.
"""

import asyncio
import logging
import sys

from sqlalchemy import delete

from config import settings
from database import AsyncSessionLocal, engine
from models.product import Product
from utils.validation import apply_defaults, validate_product

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

SEED_PRODUCTS = [
    {
        "name": "Wireless Headphones",
        "description": "High-quality noise-cancelling wireless headphones.",
        "price": 99.99,
        "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=500&auto=format&fit=crop&q=60",
        "quantity": 15,
    },
    {
        "name": "Smart Watch",
        "description": "Fitness tracker with heart rate monitor.",
        "price": 149.50,
        "image": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=500&auto=format&fit=crop&q=60",
        "quantity": 4,
    },
    {
        "name": "Running Shoes",
        "description": "Lightweight and durable running shoes.",
        "price": 79.99,
        "image": "https://images.unsplash.com/photo-1542291026-7eec264c27ff?w=500&auto=format&fit=crop&q=60",
        "quantity": 20,
    },
    {
        "name": "Digital Camera",
        "description": "Professional DSLR camera.",
        "price": 450.00,
        "image": "https://images.unsplash.com/photo-1526170375885-4d8ecf77b99f?w=500&auto=format&fit=crop&q=60",
        "quantity": 2,
    },
]


async def seed(products=SEED_PRODUCTS, session_factory=AsyncSessionLocal) -> int:
    rows = []
    for item in products:
        errors = validate_product(item)
        if errors:
            raise ValueError(f"Invalid seed product {item.get('name')!r}: {errors}")
        rows.append(Product(**apply_defaults(item)))

    async with session_factory() as db:
        async with db.begin():
            await db.execute(delete(Product))
            db.add_all(rows)

    return len(rows)


async def main():
    try:
        count = await seed()
        logger.info(f"Database seeded with {count} products")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except Exception as e:
        logger.error(f"Failed to seed database: {e}")
        sys.exit(1)
