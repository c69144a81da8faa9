"""
Tests for query sanitisation and pagination parameters.
"""

import pytest

from core.exceptions import ValidationError
from search.query_sanitizer import (
    sanitize_query,
    validate_query,
    clean_query,
    get_page_window,
    MAX_QUERY_LENGTH,
    MAX_PAGE_SIZE,
    DEFAULT_PAGE_SIZE,
)


def _params(**params):
    return {k: str(v) for k, v in params.items()}


class TestSanitizeQuery:

    def test_strips_and_collapses_whitespace(self):
        assert sanitize_query("  red \t dress\n under $50 ") == "red dress under $50"

    def test_removes_html_tags(self):
        assert sanitize_query("<b>red</b> dress<script>") == "red dress"

    def test_unescapes_entities(self):
        assert sanitize_query("shoes &amp; bags") == "shoes & bags"

    def test_removes_control_characters(self):
        assert sanitize_query("red\x00 dress\x07") == "red dress"

    def test_does_not_truncate(self):
        assert len(sanitize_query("a" * (MAX_QUERY_LENGTH + 50))) == MAX_QUERY_LENGTH + 50

    def test_empty(self):
        assert sanitize_query("") == ""
        assert sanitize_query(None) == ""


class TestValidateQuery:

    def test_valid(self):
        assert validate_query("red dress") is None

    def test_missing(self):
        assert "Missing" in validate_query("")

    def test_too_short(self):
        assert "at least" in validate_query("a")

    def test_only_symbols(self):
        assert "letter or number" in validate_query("!!!")

    def test_too_long(self):
        assert "at most" in validate_query("a" * (MAX_QUERY_LENGTH + 1))

    def test_max_length_is_allowed(self):
        assert validate_query("a" * MAX_QUERY_LENGTH) is None


class TestPaginationParams:

    def test_defaults(self):
        assert get_page_window(_params()) == (0, DEFAULT_PAGE_SIZE)

    def test_page_based(self):
        assert get_page_window(_params(page=3, limit=5)) == (10, 5)

    def test_offset_takes_priority(self):
        assert get_page_window(_params(page=3, offset=7, limit=5)) == (7, 5)

    def test_limit_is_clamped(self):
        assert get_page_window(_params(limit=1000)) == (0, MAX_PAGE_SIZE)
        assert get_page_window(_params(limit=0)) == (0, 1)

    def test_garbage_values_fall_back(self):
        assert get_page_window(_params(page="x", limit="y")) == (0, DEFAULT_PAGE_SIZE)

    def test_page_number(self):
        assert get_page_window(_params(offset=40, limit=20)).page == 3


class TestPageWindow:

    def test_apply(self):
        data = {"products": list(range(5)), "meta": {"total_results": 5}}
        page = get_page_window(_params(page=2, limit=2)).apply(data)

        assert page["products"] == [2, 3]
        assert page["total"] == 5
        assert page["has_more"] is True
        assert page["total_pages"] == 3
        assert page["meta"] == {"total_results": 5}
        assert data["products"] == [0, 1, 2, 3, 4]

    def test_apply_empty(self):
        page = get_page_window(_params()).apply({"products": []})

        assert page["total_pages"] == 1
        assert page["has_more"] is False


class TestCleanQuery:

    def test_returns_sanitised_query(self):
        assert clean_query("  red   dress ") == "red dress"

    def test_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            clean_query("<b></b>")

        assert exc_info.value.details == {"field": "q"}

    def test_over_long_query_is_rejected(self):
        """Test that length is checked before anything could shorten the query."""
        with pytest.raises(ValidationError) as exc_info:
            clean_query("red dress " * 30)

        assert "at most" in exc_info.value.message
