"""
API tests for the search endpoints.

Run with: python -m pytest search/tests/test_views.py -v
"""

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from search.services import QueryAnalysisService
from search.views import AnalyzeQueryView


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


class TestSearchView:

    def test_red_dress(self, client):
        response = client.get("/api/v1/search/", {"q": "red dress"})

        assert response.status_code == 200
        data = response.json()
        ids = [p["id"] for p in data["products"]]
        assert ids == ["1"]
        assert data["meta"]["used_fallback"] is False
        assert data["query"]["parsed"]["color"] == "red"
        assert data["total"] == 1
        assert data["page"] == 1

    def test_no_results(self, client):
        response = client.get("/api/v1/search/", {"q": "zzz nonexistent gibberish"})

        assert response.status_code == 200
        data = response.json()
        assert data["products"] == []
        assert data["meta"]["used_fallback"] is True
        assert data["has_more"] is False
        assert data["total_pages"] == 1

    def test_missing_query(self, client):
        response = client.get("/api/v1/search/")

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "validation_error"
        assert data["detail"] == {"field": "q"}

    def test_query_too_short(self, client):
        response = client.get("/api/v1/search/", {"q": "a"})
        assert response.status_code == 400

    def test_over_long_query(self, client):
        response = client.get("/api/v1/search/", {"q": "red dress " * 30})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_symbol_only_query(self, client):
        response = client.get("/api/v1/search/", {"q": "!!"})
        assert response.status_code == 400

    def test_pagination(self, client):
        response = client.get("/api/v1/search/", {"q": "clothing", "limit": 2, "page": 2})

        data = response.json()
        assert [p["id"] for p in data["products"]] == ["7", "8"]
        assert data["total"] == 4
        assert data["page"] == 2
        assert data["limit"] == 2
        assert data["has_more"] is False
        assert data["total_pages"] == 2

    def test_second_request_is_cached(self, client):
        first = client.get("/api/v1/search/", {"q": "wireless"}).json()
        second = client.get("/api/v1/search/", {"q": "Wireless"}).json()

        assert "_cached" not in first
        assert second["_cached"] is True
        assert second["products"] == first["products"]

    def test_response_time_header(self, client):
        response = client.get("/api/v1/search/", {"q": "yoga"})
        assert response["X-Response-Time"].endswith("ms")


class TestParseQueryView:

    def test_parse(self, client):
        response = client.get("/api/v1/search/parse/", {"q": "Red dress under $50"})

        assert response.status_code == 200
        data = response.json()
        assert data["original"] == "Red dress under $50"
        assert data["parsed"]["color"] == "red"
        assert data["parsed"]["category"] == "dress"
        assert data["parsed"]["price_max"] == 50
        assert data["parsed"]["price_range"] is None

    def test_parse_range(self, client):
        data = client.get("/api/v1/search/parse/", {"q": "Electronics between $30 and $150"}).json()
        assert data["parsed"]["price_range"] == {"min": 30, "max": 150}

    def test_parse_requires_query(self, client):
        assert client.get("/api/v1/search/parse/").status_code == 400


class TestAnalyzeQueryView:

    @pytest.fixture(autouse=True)
    def rule_based_analysis(self, monkeypatch):
        monkeypatch.setattr(AnalyzeQueryView, "service", QueryAnalysisService(api_key=""))

    def test_analyze(self, client):
        response = client.get("/api/v1/search/analyze/", {"q": "Red dress under $50"})

        assert response.status_code == 200
        data = response.json()
        assert data["categories"] == ["dress"]
        assert data["priceRange"] == {"max": 50}
        assert data["attributes"] == {"color": "red"}

    def test_analyze_without_price(self, client):
        data = client.get("/api/v1/search/analyze/", {"q": "yoga mat"}).json()

        assert data["keywords"] == ["yoga", "mat"]
        assert "priceRange" not in data


class TestLegacyRoutes:

    def test_unversioned_search_is_deprecated(self, client):
        response = client.get("/api/search/", {"q": "red dress"})

        assert response.status_code == 200
        assert response["Deprecation"] == "true"
        assert "Sunset" in response

    def test_versioned_search_has_no_deprecation(self, client):
        response = client.get("/api/v1/search/", {"q": "red dress"})
        assert "Deprecation" not in response
