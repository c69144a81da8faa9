"""
Catalog Views

API endpoints for browsing the product catalog and fetching
recommendations.
"""

import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from .repositories import product_repository
from .serializers import ProductListSerializer, ProductSerializer, RecommendationsSerializer

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 4


class ProductListView(APIView):
    """
    List catalog products.

    GET /api/v1/products/?category=<name>

    Query params:
        category - Optional category filter (case-insensitive)
    """
    permission_classes = [AllowAny]
    repository = product_repository

    def get(self, request):
        category = request.query_params.get('category', '').strip()
        if category:
            products = self.repository.list_by_category(category)
        else:
            products = self.repository.get_all()

        return Response(ProductListSerializer({
            "products": products,
            "total": len(products),
        }).data)


class ProductDetailView(APIView):
    """
    Fetch a single product.

    GET /api/v1/products/<id>/

    Unknown ids return 404 ``not_found``.
    """
    permission_classes = [AllowAny]
    repository = product_repository

    def get(self, request, product_id):
        product = self.repository.get_by_id(product_id)
        return Response(ProductSerializer(product).data)


class RecommendationsView(APIView):
    """
    Product recommendations.

    GET /api/v1/recommendations/?product_id=<id>&category=<name>

    Resolution order:
        product_id - products in the same category, excluding the product
        category   - products in that category
        (neither)  - the first catalog entries
    """
    permission_classes = [AllowAny]
    repository = product_repository

    def get(self, request):
        product_id = request.query_params.get('product_id', '').strip()
        category = request.query_params.get('category', '').strip()

        if product_id:
            recommendations = self.repository.related_to(product_id, limit=RECOMMENDATION_LIMIT)
        elif category:
            recommendations = self.repository.list_by_category(category)[:RECOMMENDATION_LIMIT]
        else:
            recommendations = self.repository.featured(limit=RECOMMENDATION_LIMIT)

        logger.debug(
            f"Recommendations for product_id={product_id or '-'} "
            f"category={category or '-'}: {len(recommendations)} items"
        )
        return Response(RecommendationsSerializer({"recommendations": recommendations}).data)
