"""
Tests for Core Middleware

Tests:
1. RequestIDMiddleware
2. Permissive CORS on the application
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from webfinger_proxy.core.middleware import RequestIDMiddleware


class TestRequestIDMiddleware:
    """Test RequestIDMiddleware."""

    def _client(self) -> TestClient:
        app = FastAPI()
        app.add_middleware(RequestIDMiddleware)

        @app.get("/test")
        async def test_route():
            return {"status": "ok"}

        return TestClient(app)

    def test_middleware_generates_request_id(self):
        response = self._client().get("/test")

        assert response.status_code == 200
        assert response.headers["x-request-id"]

    def test_middleware_echoes_client_request_id(self):
        response = self._client().get("/test", headers={"X-Request-ID": "req-123"})

        assert response.headers["x-request-id"] == "req-123"


class TestCORS:
    """CORS is open to every origin."""

    def test_preflight_from_any_origin(self):
        from webfinger_proxy.main import app

        client = TestClient(app)
        response = client.options(
            "/.well-known/webfinger",
            headers={
                "Origin": "https://client.example",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_simple_request_carries_request_id(self):
        from webfinger_proxy.main import app

        client = TestClient(app)
        response = client.get("/health", headers={"Origin": "https://client.example"})

        assert response.headers["access-control-allow-origin"] == "*"
        assert "x-request-id" in response.headers
