"""
Root GraphQL query definitions
"""

import strawberry

from ..types.product import Product, ProductQueryInput


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def products(
        self, info: strawberry.Info, input: ProductQueryInput | None = None
    ) -> list[Product]:
        """Get one page of products, optionally sorted."""
        from ..resolvers.product import resolve_products

        return await resolve_products(info, input or ProductQueryInput())
