"""
Product Filter

Applies a ParsedQuery to a product collection.

Strict pass: every extracted constraint narrows the working set (AND).
Lenient pass: if the strict pass leaves nothing and the query is not blank,
any product mentioning any query word longer than two characters is kept (OR).
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from catalog.products import Product

from .query_parser import ParsedQuery

logger = logging.getLogger(__name__)

# Fallback tokens must be longer than this
MIN_FALLBACK_TOKEN_LENGTH = 2


@dataclass
class FilterOutcome:
    """Filtered products plus whether the lenient pass produced them."""
    products: List[Product]
    used_fallback: bool = False


def _name_or_description(product: Product, term: str) -> bool:
    return term in product.name.lower() or term in product.description.lower()


class ProductFilter:
    """
    Narrows a product list with the constraints of a ParsedQuery.

    Usage:
        >>> products = ProductFilter().filter(MOCK_PRODUCTS, query_parser.parse("red dress"))
        >>> [p.id for p in products]
        ['1']
    """

    def filter(self, products: Sequence[Product], parsed: ParsedQuery) -> List[Product]:
        """Return the matching products, in input order."""
        return self.apply(products, parsed).products

    def apply(self, products: Sequence[Product], parsed: ParsedQuery) -> FilterOutcome:
        """Run the strict pass and, when it comes back empty, the lenient pass."""
        results = self.strict(products, parsed)

        if results or not parsed.query.strip():
            return FilterOutcome(products=results)

        fallback = self.lenient(products, parsed.query)
        logger.info(
            f"No strict matches for {parsed.query!r}; "
            f"lenient search returned {len(fallback)} products"
        )
        return FilterOutcome(products=fallback, used_fallback=True)

    # ─── Strict (AND) pass ───────────────────────────────────────

    def strict(self, products: Sequence[Product], parsed: ParsedQuery) -> List[Product]:
        # General match always runs; an empty query matches everything
        results = [p for p in products if parsed.query in p.search_text]

        if parsed.category is not None:
            results = [
                p for p in results
                if parsed.category in p.category.lower() or _name_or_description(p, parsed.category)
            ]

        if parsed.color is not None:
            results = [p for p in results if _name_or_description(p, parsed.color)]

        if parsed.price_max is not None:
            results = [p for p in results if p.price <= parsed.price_max]

        if parsed.price_range is not None:
            results = [p for p in results if parsed.price_range.contains(p.price)]

        if parsed.pattern is not None:
            results = [p for p in results if _name_or_description(p, parsed.pattern)]

        if parsed.gender is not None:
            gender_term = parsed.gender.lower()
            if gender_term.endswith("'s"):
                gender_term = gender_term[:-2]
            results = [p for p in results if _name_or_description(p, gender_term)]

        return results

    # ─── Lenient (OR) pass ───────────────────────────────────────

    @staticmethod
    def lenient(products: Sequence[Product], query: str) -> List[Product]:
        """Products whose text contains any query word longer than two characters."""
        words = [w for w in query.lower().split() if len(w) > MIN_FALLBACK_TOKEN_LENGTH]
        if not words:
            return []
        return [p for p in products if any(w in p.search_text for w in words)]


# Singleton instance
product_filter = ProductFilter()
