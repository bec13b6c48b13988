"""
Product read path: repository and service layers
"""

from .repository import ProductRepository
from .service import MAX_PAGE_SIZE, ProductService

__all__ = ["MAX_PAGE_SIZE", "ProductRepository", "ProductService"]
