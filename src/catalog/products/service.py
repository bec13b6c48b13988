"""Business rules for product reads."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from ..logging import get_logger

if TYPE_CHECKING:
    from ..graphql.types.product import Product, ProductQueryInput
    from .repository import ProductRepository

logger = get_logger(__name__)

MAX_PAGE_SIZE = 100


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def get_products(self, query: ProductQueryInput) -> list[Product]:
        """
        Return one page of products.

        Page sizes above MAX_PAGE_SIZE are clamped on a copy of the input;
        everything else is handed to the repository as received.
        """
        if query.page_size > MAX_PAGE_SIZE:
            logger.debug(
                "Clamping page size",
                requested=query.page_size,
                effective=MAX_PAGE_SIZE,
            )
            query = dataclasses.replace(query, page_size=MAX_PAGE_SIZE)

        return await self.repository.list_products(query)
