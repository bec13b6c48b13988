"""Repository for paginated, sorted product reads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Products
from ..graphql.types.product import Product
from ..logging import get_logger

if TYPE_CHECKING:
    from ..graphql.types.product import ProductQueryInput

logger = get_logger(__name__)

# Closed allow-list: caller text never reaches the ORDER BY clause
SORTABLE_FIELDS = {
    "Id": Products.id,
    "Name": Products.name,
    "Price": Products.price,
    "Stock": Products.stock,
}
DEFAULT_SORT_FIELD = "Id"


def resolve_sort_field(sort_by: str | None) -> str:
    """Return sort_by when it names a sortable field, else the default field."""
    if sort_by in SORTABLE_FIELDS:
        return sort_by
    return DEFAULT_SORT_FIELD


def resolve_sort_direction(is_descending: bool) -> str:
    return "DESC" if is_descending else "ASC"


def compute_offset(page_index: int, page_size: int) -> int:
    # page_index < 1 is not clamped
    return (page_index - 1) * page_size


def build_products_query(query: ProductQueryInput) -> Select:
    """Build the SELECT for one page of products.

    Only the column and direction come from fixed vocabularies; the limit
    and offset are bound parameters.
    """
    column = SORTABLE_FIELDS[resolve_sort_field(query.sort_by)]
    if resolve_sort_direction(query.is_descending) == "DESC":
        order_by = column.desc()
    else:
        order_by = column.asc()

    return (
        select(Products.id, Products.name, Products.price, Products.stock)
        .order_by(order_by)
        .offset(compute_offset(query.page_index, query.page_size))
        .limit(query.page_size)
    )


class ProductRepository:
    """Reads products through a request-scoped session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_products(self, query: ProductQueryInput) -> list[Product]:
        stmt = build_products_query(query)

        logger.debug(
            "Listing products",
            sort_field=resolve_sort_field(query.sort_by),
            direction=resolve_sort_direction(query.is_descending),
            offset=compute_offset(query.page_index, query.page_size),
            limit=query.page_size,
        )

        result = await self.session.execute(stmt)

        # TODO: return total count alongside the page for has-next-page support
        return [
            Product(id=row.id, name=row.name, price=row.price, stock=row.stock)
            for row in result.all()
        ]
