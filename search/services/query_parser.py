"""
Query Parser Service

Rule-based parser that turns a free-text product search into structured
filters:

1. Price ceiling ("under $50", "less than 80", "cheaper than $100")
2. Price range ("between $30 and $150")
3. Color, category, pattern and gender from fixed vocabularies

Vocabulary terms are matched as plain substrings of the lowercased query.
When several terms of one vocabulary occur, the one listed first in the
vocabulary wins, regardless of where it appears in the query.
"""

import re
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple, Dict, Any, Union

from .vocabulary import COLORS, CATEGORIES, PATTERNS, GENDERS, gender_variants

logger = logging.getLogger(__name__)

Number = Union[int, float]


def price_number(digits: str) -> Number:
    """
    Convert a run of ASCII digits to a price.

    Digit runs too long for int() become float, which overflows to inf.
    """
    try:
        return int(digits)
    except ValueError:
        return float(digits)


# =============================================================================
# PARSED QUERY
# =============================================================================

@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds from a "between $N and $M" phrase."""
    min: Number
    max: Number

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max

    def to_dict(self) -> Dict[str, Number]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class ParsedQuery:
    """
    Structured representation of a parsed product search query.

    Example:
        Input: "Red dress under $50"
        Output:
            query: "red dress under $50"
            color: "red"
            category: "dress"
            price_max: 50
    """
    query: str  # lowercased original, used for general substring matching
    original: str = ""

    # Primary entities (first vocabulary hit)
    category: Optional[str] = None
    color: Optional[str] = None
    pattern: Optional[str] = None
    gender: Optional[str] = None

    # Price constraints
    price_max: Optional[Number] = None
    price_range: Optional[PriceRange] = None

    # Every vocabulary hit, in vocabulary order
    categories: Tuple[str, ...] = field(default_factory=tuple)
    colors: Tuple[str, ...] = field(default_factory=tuple)
    patterns: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_filters(self) -> bool:
        """True when at least one structured constraint was extracted."""
        return bool(self.get_filters())

    def get_filters(self) -> Dict[str, Any]:
        """Get the active structured filters."""
        filters = {}

        if self.category:
            filters["category"] = self.category
        if self.color:
            filters["color"] = self.color
        if self.price_max is not None:
            filters["price_max"] = self.price_max
        if self.price_range is not None:
            filters["price_range"] = self.price_range.to_dict()
        if self.pattern:
            filters["pattern"] = self.pattern
        if self.gender:
            filters["gender"] = self.gender

        return filters

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "original": self.original,
            "query": self.query,
            "parsed": {
                "category": self.category,
                "color": self.color,
                "price_max": self.price_max,
                "price_range": self.price_range.to_dict() if self.price_range else None,
                "pattern": self.pattern,
                "gender": self.gender,
            },
            "multi": {
                "categories": list(self.categories),
                "colors": list(self.colors),
                "patterns": list(self.patterns),
            },
        }


# =============================================================================
# QUERY PARSER
# =============================================================================

class QueryParser:
    """
    Parses natural language product searches.

    Never raises on text input: a query with nothing recognisable yields a
    ParsedQuery whose optional fields are all None.

    Example:
        >>> parser = QueryParser()
        >>> result = parser.parse("Electronics between $30 and $150")
        >>> result.category
        'electronics'
        >>> result.price_range
        PriceRange(min=30, max=150)
    """

    # ─── Compiled regex patterns ──────────────────────────────────

    # One pattern, three alternatives; the alternative that matched owns the group
    _PRICE_MAX_PATTERN = re.compile(
        r'under\s+\$?([0-9]+)|less\s+than\s+\$?([0-9]+)|cheaper\s+than\s+\$?([0-9]+)',
        re.IGNORECASE,
    )

    _PRICE_RANGE_PATTERN = re.compile(
        r'between\s+\$?([0-9]+)\s+and\s+\$?([0-9]+)',
        re.IGNORECASE,
    )

    def __init__(self, colors=COLORS, categories=CATEGORIES, patterns=PATTERNS, genders=GENDERS):
        self.colors = tuple(colors)
        self.categories = tuple(categories)
        self.patterns = tuple(patterns)
        self.genders = tuple(genders)

    # ─── Public API ──────────────────────────────────────────────

    def parse(self, query: str) -> ParsedQuery:
        """Parse a search query into structured filters."""
        query_lower = query.lower()

        colors = self._match_all(query_lower, self.colors)
        categories = self._match_all(query_lower, self.categories)
        patterns = self._match_all(query_lower, self.patterns)

        result = ParsedQuery(
            query=query_lower,
            original=query,
            category=categories[0] if categories else None,
            color=colors[0] if colors else None,
            pattern=patterns[0] if patterns else None,
            gender=self._extract_gender(query_lower),
            price_max=self._extract_price_max(query),
            price_range=self._extract_price_range(query),
            categories=categories,
            colors=colors,
            patterns=patterns,
        )

        logger.debug(f"Parsed query {query!r}: {result.get_filters()}")
        return result

    # ─── Vocabulary matching ─────────────────────────────────────

    @staticmethod
    def _match_all(query_lower: str, vocabulary: Tuple[str, ...]) -> Tuple[str, ...]:
        """All vocabulary entries found in the query, in vocabulary order."""
        return tuple(term for term in vocabulary if term in query_lower)

    def _extract_gender(self, query_lower: str) -> Optional[str]:
        for gender in self.genders:
            if any(variant in query_lower for variant in gender_variants(gender)):
                return gender
        return None

    # ─── Price extraction ────────────────────────────────────────

    def _extract_price_max(self, query: str) -> Optional[Number]:
        """
        Extract a price ceiling.

        Examples:
            "shoes under $80"        → 80
            "less than 100 dollars"  → 100
            "cheaper than $25"       → 25
        """
        match = self._PRICE_MAX_PATTERN.search(query)
        if not match:
            return None
        digits = next(group for group in match.groups() if group is not None)
        return price_number(digits)

    def _extract_price_range(self, query: str) -> Optional[PriceRange]:
        """
        Extract inclusive price bounds.

        Bounds are kept as written; "between $100 and $20" yields a range
        that no price can satisfy.
        """
        match = self._PRICE_RANGE_PATTERN.search(query)
        if not match:
            return None
        return PriceRange(min=price_number(match.group(1)), max=price_number(match.group(2)))


# =============================================================================
# CACHED PARSE: identical queries are parsed once
# =============================================================================

@lru_cache(maxsize=256)
def parse_query(query: str) -> ParsedQuery:
    """
    Cache parse results for identical queries.

    Safe to share because ParsedQuery is immutable.
    """
    return query_parser.parse(query)


# Singleton instance for easy import
query_parser = QueryParser()
