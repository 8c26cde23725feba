"""Tests for the health endpoint, middleware and error envelope."""

import pytest
from fastapi.testclient import TestClient

from product_service.api.dependencies import get_store


class TestHealth:
    """Tests for GET /api/health."""

    def test_health_check(self, client: TestClient):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "product-service"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert data["productCount"] == 8

    def test_product_count_tracks_catalog(self, client: TestClient, product_payload):
        client.post("/api/products", json=product_payload)

        assert client.get("/api/health").json()["productCount"] == 9


class TestRequestId:
    """Tests for request ID correlation."""

    def test_request_id_generated(self, client: TestClient):
        response = client.get("/api/health")

        assert "X-Request-ID" in response.headers
        assert len(response.headers["X-Request-ID"]) == 36

    def test_request_id_echoed(self, client: TestClient):
        response = client.get("/api/health", headers={"X-Request-ID": "test-request-123"})

        assert response.headers["X-Request-ID"] == "test-request-123"

    @pytest.mark.parametrize("supplied", ["x" * 200, "bad id with spaces", "<script>"])
    def test_malformed_request_id_replaced(self, client: TestClient, supplied):
        response = client.get("/api/health", headers={"X-Request-ID": supplied})

        assert response.headers["X-Request-ID"] != supplied
        assert len(response.headers["X-Request-ID"]) == 36

    def test_request_id_in_error_body(self, client: TestClient):
        response = client.get(
            "/api/products/non-existent-id",
            headers={"X-Request-ID": "trace-me"},
        )

        assert response.status_code == 404
        assert response.json()["request_id"] == "trace-me"


class TestErrorEnvelope:
    """Tests for the shared error body."""

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "ERROR"
        assert body["error"] == "Not Found"
        assert body["details"] == []

    def test_method_not_allowed(self, client: TestClient):
        response = client.patch("/api/categories")

        assert response.status_code == 405
        assert response.json()["error"] == "Method Not Allowed"

    def test_openapi_docs_available(self, client: TestClient):
        assert client.get("/docs").status_code == 200
        assert "/api/products" in client.get("/openapi.json").json()["paths"]

    def test_cors_headers(self, client: TestClient):
        response = client.get("/api/health", headers={"Origin": "http://localhost:3000"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_unexpected_error_returns_internal_error(self, client: TestClient):
        from product_service.main import app

        def broken_store():
            raise RuntimeError("store unavailable")

        app.dependency_overrides[get_store] = broken_store

        response = client.get("/api/products", headers={"X-Request-ID": "boom-1"})

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "boom-1"
        assert response.json() == {
            "error": "An internal error occurred",
            "error_code": "INTERNAL_ERROR",
            "details": [],
            "request_id": "boom-1",
        }
