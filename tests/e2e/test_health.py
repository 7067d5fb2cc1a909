"""End-to-end tests for the health endpoint."""

from fastapi.testclient import TestClient

from federate.interface.api.app import create_app
from tests.di import build_test_container


def test_health():
    """Should report the service as healthy."""
    client = TestClient(create_app(build_test_container()))

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "0.1.0"
