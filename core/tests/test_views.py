"""
Tests for the health check and API root.
"""

import pytest
from django.test import Client


@pytest.fixture
def client():
    return Client()


class TestHealthCheck:

    def test_health(self, client):
        response = client.get("/api/v1/health/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "intellibuy-api"
        assert data["catalog_size"] == 12

    def test_legacy_health_is_deprecated(self, client):
        response = client.get("/api/health/")

        assert response.status_code == 200
        assert response["Deprecation"] == "true"
        assert response["Sunset"] == "Tue, 01 Jun 2027 00:00:00 GMT"
        assert response["Link"] == '</api/v1/health/>; rel="successor-version"'

    def test_api_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "search" in response.json()["endpoints"]
        assert "X-Response-Time" not in response
