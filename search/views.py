"""
Search Views

API endpoints for natural-language product search, query parsing
and query analysis.
"""

import hashlib
import logging

from django.conf import settings
from django.core.cache import cache
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from .query_sanitizer import clean_query, get_page_window
from .services import search_service, query_analysis_service, parse_query

logger = logging.getLogger(__name__)


class SearchView(APIView):
    """
    Search the catalog using natural language queries.

    GET /api/v1/search/?q=<query>&page=1&limit=20

    Query params:
        q       - Search query (required, 2-200 chars)
        page    - Page number (default: 1)
        limit   - Results per page (default: 20, max: 50)
        offset  - Alternative to page (overrides page if present)

    Response includes:
        - Parsed query (category, color, price constraints, pattern, gender)
        - Paginated list of matching products
        - Pagination metadata (total, page, has_more)
    """
    permission_classes = [AllowAny]
    service = search_service

    def get(self, request):
        query = clean_query(request.query_params.get("q"))
        window = get_page_window(request.query_params)

        # ── Cache lookup ─────────────────────────────
        cache_key = f"search:{hashlib.md5(query.lower().encode()).hexdigest()}"
        cached = cache.get(cache_key)

        if cached:
            page = window.apply(cached)
            page['_cached'] = True
            return Response(page)

        # ── Search ────────────────────────────────────
        result = self.service.search(query)
        response_data = result.to_dict()

        # Cache full results (before pagination)
        ttl = getattr(settings, 'SEARCH_CACHE_TTL', 300)
        if ttl > 0:
            cache.set(cache_key, response_data, timeout=ttl)

        return Response(window.apply(response_data))


class ParseQueryView(APIView):
    """
    Parse a query without searching.

    GET /api/v1/search/parse/?q=<query>

    Returns the structured filters the search would apply.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        query = clean_query(request.query_params.get("q"))
        return Response(parse_query(query).to_dict())


class AnalyzeQueryView(APIView):
    """
    Keyword-oriented query analysis.

    GET /api/v1/search/analyze/?q=<query>

    Response:
        {"keywords": [...], "categories": [...], "priceRange": {...}, "attributes": {...}}

    ``priceRange`` is omitted when the query states no price.
    """
    permission_classes = [AllowAny]
    service = query_analysis_service

    def get(self, request):
        query = clean_query(request.query_params.get("q"))
        analysis = self.service.analyze(query)
        logger.debug(f"Analyzed {query!r}: {analysis.to_dict()}")
        return Response(analysis.to_dict())
