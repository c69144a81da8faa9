"""
Query Analysis Service

Produces the keyword-oriented analysis shape consumed by recommendation and
assistant call sites:

    {"keywords": [...], "categories": [...], "priceRange": {"min", "max"}, "attributes": {...}}

Uses OpenAI when an API key is configured and falls back to the rule-based
QueryParser (through ``to_query_analysis``) otherwise or on any API failure.
"""

import re
import json
import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from openai import OpenAI, OpenAIError

from core.exceptions import ServiceError
from intellibuy.config import config

from .query_parser import ParsedQuery, price_number, query_parser
from .vocabulary import COLORS, CATEGORIES

logger = logging.getLogger(__name__)


STOP_WORDS = frozenset({
    "a", "an", "the", "in", "on", "at", "for", "with", "by", "to",
    "from", "of", "and", "or", "under", "over", "between",
})

_OVER_PATTERN = re.compile(r'over\s+\$?([0-9]+)', re.IGNORECASE)
_SIZE_PATTERN = re.compile(r'size\s+([a-zA-Z0-9]+)', re.IGNORECASE)
_BRAND_PATTERN = re.compile(r'brand\s+([a-zA-Z0-9]+)', re.IGNORECASE)


@dataclass
class QueryAnalysis:
    """Keyword-oriented view of a search query."""
    keywords: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    price_range: Optional[Dict[str, float]] = None  # {"min"?, "max"?}
    attributes: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "keywords": self.keywords,
            "categories": self.categories,
            "attributes": self.attributes,
        }
        if self.price_range:
            result["priceRange"] = self.price_range
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QueryAnalysis":
        """
        Build from a model response payload.
        Raises ValueError / TypeError on a payload of the wrong shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")

        keywords = data.get("keywords") or []
        categories = data.get("categories") or []
        if not isinstance(keywords, list) or not isinstance(categories, list):
            raise TypeError("'keywords' and 'categories' must be arrays")

        price_range = None
        raw_range = data.get("priceRange")
        if raw_range:
            if not isinstance(raw_range, dict):
                raise TypeError("'priceRange' must be an object")
            price_range = {k: float(raw_range[k]) for k in ("min", "max") if raw_range.get(k) is not None}

        attributes = data.get("attributes") or {}
        if not isinstance(attributes, dict):
            raise TypeError("'attributes' must be an object")

        return cls(
            keywords=[str(k).lower() for k in keywords],
            categories=[str(c).lower() for c in categories],
            price_range=price_range or None,
            attributes={str(k): str(v) for k, v in attributes.items() if v is not None},
        )


def to_query_analysis(parsed: ParsedQuery) -> QueryAnalysis:
    """
    Adapt a canonical ParsedQuery to the keyword-oriented analysis shape.

    - priceRange: "under"-style ceiling as max, "over $N" as min;
      an explicit "between" range overrides both
    - categories: every category term found, in vocabulary order
    - attributes: color, pattern, gender, plus "size X" / "brand X"
    - keywords: query words longer than two characters that are neither
      stop words nor color/category terms
    """
    text = parsed.original or parsed.query

    price_range: Dict[str, float] = {}
    if parsed.price_max is not None:
        price_range["max"] = parsed.price_max
    over = _OVER_PATTERN.search(text)
    if over:
        price_range["min"] = price_number(over.group(1))
    if parsed.price_range is not None:
        price_range = parsed.price_range.to_dict()

    attributes: Dict[str, str] = {}
    if parsed.color:
        attributes["color"] = parsed.color
    if parsed.pattern:
        attributes["pattern"] = parsed.pattern
    if parsed.gender:
        attributes["gender"] = parsed.gender
    size = _SIZE_PATTERN.search(text)
    if size:
        attributes["size"] = size.group(1)
    brand = _BRAND_PATTERN.search(text)
    if brand:
        attributes["brand"] = brand.group(1)

    keywords = [
        word for word in parsed.query.split()
        if word not in STOP_WORDS and len(word) > 2
        and word not in COLORS and word not in CATEGORIES
    ]

    return QueryAnalysis(
        keywords=keywords,
        categories=list(parsed.categories),
        price_range=price_range or None,
        attributes=attributes,
    )


class QueryAnalysisService:
    """
    Search query analysis.

    Uses OpenAI chat completions (JSON mode) when a key is configured.
    Falls back to the rule-based parser if the key is missing or the API
    call fails.
    """

    SYSTEM_PROMPT = "You are a search query analyzer for an e-commerce platform."

    USER_PROMPT = (
        'Analyze this e-commerce search query: "{query}"\n\n'
        "Extract the following information and return as JSON:\n"
        "- keywords: array of important search terms\n"
        "- categories: array of product categories mentioned\n"
        "- priceRange: object with min and max price if mentioned\n"
        "- attributes: object with product attributes (color, size, brand, etc.)"
    )

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, client=None):
        self.api_key = config.apis.openai_api_key if api_key is None else api_key
        self.model = model or config.apis.openai_model
        self._client = client

    @property
    def client(self):
        """Lazy-load OpenAI client."""
        if self._client is None and self.api_key:
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def analyze(self, query: str) -> QueryAnalysis:
        """
        Analyze a search query.

        Args:
            query: Natural language search query

        Returns:
            QueryAnalysis with keywords, categories, price range and attributes
        """
        if self.client:
            try:
                return self._analyze_with_openai(query)
            except ServiceError as e:
                logger.warning(f"OpenAI query analysis failed: {e}, falling back to parser")

        return to_query_analysis(query_parser.parse(query))

    def _analyze_with_openai(self, query: str) -> QueryAnalysis:
        """Raises ServiceError if the API call fails or returns an unusable payload."""
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": self.SYSTEM_PROMPT},
                    {"role": "user", "content": self.USER_PROMPT.format(query=query)},
                ],
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            raise ServiceError(str(e), vendor="openai") from e

        try:
            content = response.choices[0].message.content
            if not content:
                raise ValueError("No content in response")
            return QueryAnalysis.from_dict(json.loads(content))
        except (ValueError, TypeError, KeyError, IndexError) as e:
            raise ServiceError(f"Malformed analysis response: {e}", vendor="openai") from e


# Singleton instance
query_analysis_service = QueryAnalysisService()
