"""
Reusable seed data for development databases.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Products
from ..logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUCTS: list[tuple[str, Decimal, int]] = [
    ("Ballpoint Pen", Decimal("1.49"), 500),
    ("Spiral Notebook", Decimal("3.99"), 240),
    ("Desk Lamp", Decimal("24.50"), 35),
    ("Stapler", Decimal("8.75"), 80),
    ("Sticky Notes", Decimal("2.25"), 410),
    ("Mechanical Pencil", Decimal("4.10"), 150),
    ("Whiteboard Marker", Decimal("1.95"), 300),
    ("Paper Clips", Decimal("0.99"), 1000),
    ("Document Folder", Decimal("5.60"), 0),
    ("Monitor Stand", Decimal("39.00"), 12),
    ("Mouse Pad", Decimal("6.30"), 95),
    ("Label Maker", Decimal("54.99"), 7),
]


async def ensure_sample_products(db: AsyncSession) -> int:
    """
    Insert the sample products when the products table is empty.

    Args:
        db: Database session

    Returns:
        Number of products inserted (0 if the table already had rows)
    """
    result = await db.execute(select(func.count()).select_from(Products))
    existing = result.scalar_one()

    if existing:
        logger.debug("Products already present, skipping seed", count=existing)
        return 0

    db.add_all(
        Products(name=name, price=price, stock=stock) for name, price, stock in SAMPLE_PRODUCTS
    )
    await db.flush()

    logger.info("Seeded sample products", count=len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
