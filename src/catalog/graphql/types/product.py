"""
Product GraphQL type definitions
"""

from decimal import Decimal

import strawberry


@strawberry.type
class Product:
    """Product type for GraphQL API."""

    id: int
    name: str
    price: Decimal
    stock: int


@strawberry.input
class ProductQueryInput:
    """Paging and ordering options for the products query.

    Non-positive page_index or page_size values are passed through as given;
    how the database treats the resulting offset/limit is not defined here.
    """

    page_index: int = 1
    page_size: int = 10
    sort_by: str | None = None
    is_descending: bool = False
