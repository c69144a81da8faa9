"""
Tests for the product repository.
"""

import pytest

from catalog.products import MOCK_PRODUCTS
from catalog.repositories import ProductRepository, product_repository
from core.exceptions import NotFoundError


@pytest.fixture
def repository():
    return ProductRepository(MOCK_PRODUCTS)


class TestProductRepository:

    def test_catalog_size(self, repository):
        assert repository.count() == 12

    def test_get_by_id(self, repository):
        product = repository.get_by_id("3")

        assert product.name == "Men's Running Shoes"
        assert product.price == 89.99
        assert product.category == "footwear"

    def test_get_by_id_unknown(self, repository):
        with pytest.raises(NotFoundError) as exc_info:
            repository.get_by_id("99")

        assert exc_info.value.details == {"resource": "product", "id": "99"}

    def test_list_by_category_is_case_insensitive(self, repository):
        products = repository.list_by_category(" Electronics ")
        assert [p.id for p in products] == ["4", "6", "10"]

    def test_related_to_excludes_product(self, repository):
        related = repository.related_to("1")
        assert [p.id for p in related] == ["2", "7", "8"]

    def test_related_to_respects_limit(self, repository):
        assert len(repository.related_to("1", limit=2)) == 2

    def test_related_to_unknown(self, repository):
        with pytest.raises(NotFoundError):
            repository.related_to("99")

    def test_featured(self, repository):
        assert [p.id for p in repository.featured()] == ["1", "2", "3", "4"]

    def test_default_repository_serves_mock_catalog(self):
        assert product_repository.get_all() == list(MOCK_PRODUCTS)

    def test_search_text(self, repository):
        text = repository.get_by_id("7").search_text

        assert text == text.lower()
        assert "leather jacket" in text
        assert text.endswith("clothing")
