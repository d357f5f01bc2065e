"""
Unit tests for API middleware
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from api.middleware import CORS_HEADERS, setup_middleware
from utils import DestressApiError


EXPECTED_CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-headers": "Content-Type",
    "access-control-allow-methods": "GET,POST,OPTIONS",
}


def assert_cors(response):
    for name, value in EXPECTED_CORS.items():
        assert response.headers[name] == value


@pytest.fixture
def failing_client():
    """Client for an app whose routes raise"""
    failing_app = FastAPI()
    setup_middleware(failing_app)

    @failing_app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    @failing_app.get("/service-error")
    async def service_error():
        raise DestressApiError("upstream unavailable", "API_TEST", {"attempt": 1})

    return TestClient(failing_app)


@pytest.mark.unit
class TestAllowAllCORSMiddleware:
    """Test cases for the CORS middleware"""

    def test_header_constants(self):
        assert CORS_HEADERS["Access-Control-Allow-Origin"] == "*"
        assert len(CORS_HEADERS) == 3

    @patch('api.routes.select_quote')
    def test_preflight_quote_short_circuits(self, mock_select, client):
        """Test OPTIONS on the quote endpoint never reaches the route"""
        response = client.options("/api/quote", headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        })

        assert response.status_code == 204
        assert response.content == b""
        assert_cors(response)
        assert "x-process-time" not in response.headers
        mock_select.assert_not_called()

    @patch('api.routes.parse_track_event')
    def test_preflight_track_short_circuits(self, mock_parse, client):
        """Test OPTIONS on the track endpoint never reaches the route"""
        response = client.options("/api/track")

        assert response.status_code == 204
        assert response.content == b""
        assert_cors(response)
        mock_parse.assert_not_called()

    def test_preflight_unknown_path(self, client):
        """Test OPTIONS is answered for every path"""
        response = client.options("/anything")
        assert response.status_code == 204
        assert_cors(response)

    def test_headers_on_routed_responses(self, client):
        assert_cors(client.get("/api/quote"))
        assert_cors(client.post("/api/track", json={}))
        assert_cors(client.get("/api/track"))
        assert_cors(client.get("/health"))

    def test_headers_on_not_found(self, client):
        response = client.get("/missing")
        assert response.status_code == 404
        assert_cors(response)


@pytest.mark.unit
class TestLoggingMiddleware:
    """Test cases for the request logging middleware"""

    def test_process_time_header(self, client):
        response = client.get("/api/quote")
        assert float(response.headers["x-process-time"]) >= 0

    def test_request_logged(self, client, caplog):
        caplog.set_level("INFO", logger="API")
        client.get("/api/track")
        assert "[API] GET /api/track - 405" in caplog.text


@pytest.mark.unit
class TestErrorHandlingMiddleware:
    """Test cases for the error handling middleware"""

    def test_unexpected_error(self, failing_client):
        response = failing_client.get("/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] is True
        assert data["error_code"] == "INTERNAL_ERROR"
        assert "kaboom" not in data["message"]
        assert_cors(response)

    def test_service_error(self, failing_client):
        response = failing_client.get("/service-error")

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == "API_TEST"
        assert data["message"] == "upstream unavailable"
        assert data["context"] == {"attempt": 1}
