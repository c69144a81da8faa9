"""
Query Sanitization, shared by the search, parse and analyze views.

Cleans raw ``?q=`` input before it reaches the QueryParser and turns
``page`` / ``offset`` / ``limit`` into a bounded page window.
"""

import re
import html
from typing import NamedTuple, Optional

from core.exceptions import ValidationError
from intellibuy.config import config


# ── Limits ────────────────────────────────────────────────
MAX_QUERY_LENGTH = config.search.max_query_length
MIN_QUERY_LENGTH = 2
DEFAULT_PAGE_SIZE = config.search.default_page_size
MAX_PAGE_SIZE = config.search.max_page_size

_TAG_PATTERN = re.compile(r"<[^>]+>")
_CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_ALPHANUMERIC_PATTERN = re.compile(r"[a-zA-Z0-9]")


def sanitize_query(raw: Optional[str]) -> str:
    """
    Normalise a raw search query.

    Entities are unescaped before tags are stripped so ``&lt;b&gt;`` cannot
    smuggle markup through. Price text such as ``$50`` is left alone.
    Length is not touched; validate_query rejects over-long queries.
    """
    if not raw:
        return ""

    q = html.unescape(raw)
    q = _TAG_PATTERN.sub("", q)
    q = _CONTROL_CHARS_PATTERN.sub("", q)
    return _WHITESPACE_PATTERN.sub(" ", q).strip()


def validate_query(query: str) -> Optional[str]:
    """Return an error message for an unusable sanitised query, or None."""
    if not query:
        return "Missing required parameter 'q' (search query)"

    if len(query) < MIN_QUERY_LENGTH:
        return f"Query must be at least {MIN_QUERY_LENGTH} characters long"

    if len(query) > MAX_QUERY_LENGTH:
        return f"Query must be at most {MAX_QUERY_LENGTH} characters long"

    if not _ALPHANUMERIC_PATTERN.search(query):
        return "Query must contain at least one letter or number"

    return None


def clean_query(raw: Optional[str]) -> str:
    """Sanitise and validate in one step. Raises ValidationError on field ``q``."""
    query = sanitize_query(raw)
    error = validate_query(query)
    if error:
        raise ValidationError(error, field="q")
    return query


class PageWindow(NamedTuple):
    """A slice of a result list; ``page`` is 1-based."""
    offset: int
    limit: int

    @property
    def page(self) -> int:
        return (self.offset // self.limit) + 1

    def apply(self, response_data: dict) -> dict:
        """Copy ``response_data`` with its product list cut to this window."""
        all_products = response_data.get("products", [])
        total = len(all_products)

        page = {**response_data}
        page["products"] = all_products[self.offset:self.offset + self.limit]
        page["total"] = total
        page["page"] = self.page
        page["limit"] = self.limit
        page["has_more"] = (self.offset + self.limit) < total
        page["total_pages"] = max(1, -(-total // self.limit))  # ceil division
        return page


def _int_param(params, name: str, default: int) -> int:
    try:
        return int(params.get(name, default))
    except (ValueError, TypeError):
        return default


def get_page_window(params) -> PageWindow:
    """
    Read ``limit`` plus ``offset`` or ``page`` from query params.

        ?page=2&limit=20     page-based
        ?offset=40&limit=20  offset-based, wins over page

    ``limit`` is clamped to [1, MAX_PAGE_SIZE]; bad numbers fall back to defaults.
    """
    limit = max(1, min(_int_param(params, "limit", DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE))

    if params.get("offset") is not None:
        offset = max(0, _int_param(params, "offset", 0))
    else:
        offset = (max(1, _int_param(params, "page", 1)) - 1) * limit

    return PageWindow(offset=offset, limit=limit)
