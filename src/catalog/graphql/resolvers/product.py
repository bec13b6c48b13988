from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...products import ProductService
    from ..types.product import Product, ProductQueryInput


def get_product_service(info: strawberry.Info) -> ProductService:
    """Get the request-scoped product service from the GraphQL context."""
    return info.context["product_service"]


async def resolve_products(info: strawberry.Info, input: ProductQueryInput) -> list[Product]:
    """Resolve a page of products by delegating to the product service."""
    return await get_product_service(info).get_products(input)
