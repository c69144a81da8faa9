"""
Repository Layer
================

Encapsulates catalog lookups. Views and services call repository methods
instead of touching ``MOCK_PRODUCTS`` directly.

Usage:
    from catalog.repositories import product_repository

    product = product_repository.get_by_id("1")
    related = product_repository.related_to("1", limit=4)
"""

from typing import List

from core.repositories import BaseRepository

from .products import Product, MOCK_PRODUCTS


class ProductRepository(BaseRepository[Product]):
    """Encapsulates Product catalog queries."""

    resource_name = "product"

    def list_by_category(self, category: str) -> List[Product]:
        """Products in a category (case-insensitive), catalog order."""
        wanted = category.strip().lower()
        return self.filter(lambda p: p.category.lower() == wanted)

    def related_to(self, product_id: str, limit: int = 4) -> List[Product]:
        """
        Products sharing the given product's category, excluding itself.
        Raises NotFoundError if the product does not exist.
        """
        product = self.get_by_id(product_id)
        related = self.filter(lambda p: p.category == product.category and p.id != product.id)
        return related[:limit]

    def featured(self, limit: int = 4) -> List[Product]:
        """The first ``limit`` catalog entries."""
        return self.get_all()[:limit]


# Default repository over the mock catalog
product_repository = ProductRepository(MOCK_PRODUCTS)
