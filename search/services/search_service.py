"""
Search Service

Coordinates a catalog search: parse the query, filter the catalog,
report how the result was obtained.
"""

import time
from dataclasses import dataclass
from typing import List, Dict, Any, Optional

from catalog.products import Product
from catalog.repositories import ProductRepository, product_repository
from core.services import BaseService

from .product_filter import ProductFilter
from .query_parser import ParsedQuery, QueryParser, parse_query


@dataclass
class SearchResult:
    """Container for search results."""
    query: ParsedQuery
    products: List[Product]
    used_fallback: bool
    search_time_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query.to_dict(),
            "products": [p.to_dict() for p in self.products],
            "meta": {
                "total_results": len(self.products),
                "used_fallback": self.used_fallback,
                "search_time_ms": self.search_time_ms,
            },
        }


class SearchService(BaseService):
    """
    Natural-language product search over a product repository.

    The repository is injected so callers decide which catalog is searched
    and for how long it lives; the default is the storefront's mock catalog.
    """

    def __init__(
        self,
        repository: Optional[ProductRepository] = None,
        parser: Optional[QueryParser] = None,
        product_filter: Optional[ProductFilter] = None,
    ):
        self.repository = repository or product_repository
        self.parser = parser
        self.product_filter = product_filter or ProductFilter()

    def parse(self, query: str) -> ParsedQuery:
        if self.parser is None:
            return parse_query(query)
        return self.parser.parse(query)

    def search(self, query: str) -> SearchResult:
        """
        Search the catalog for a natural language query.

        Never raises for unmatched queries; an empty product list is a
        valid result.
        """
        start = time.perf_counter()

        parsed = self.parse(query)
        outcome = self.product_filter.apply(self.repository.get_all(), parsed)

        result = SearchResult(
            query=parsed,
            products=outcome.products,
            used_fallback=outcome.used_fallback,
            search_time_ms=self.elapsed_ms(start),
        )

        self.logger.info(
            f"Search {parsed.query!r}: {len(outcome.products)} results "
            f"(filters={parsed.get_filters()}, fallback={outcome.used_fallback}, "
            f"{result.search_time_ms}ms)"
        )
        return result


# Singleton instance
search_service = SearchService()
