"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from rolegate.interfaces.api.resources.health import HealthResource

from tests.conftest import failing_factory


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    health = HealthResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_counts_catalog_roles(uow_factory) -> None:
    app = App()
    app.add_route("/v1/health/ready", HealthResource(uow_factory), suffix="ready")

    result = TestClient(app).simulate_get("/v1/health/ready")

    assert result.status_code == 200
    assert result.json == {"status": "ready", "roles": 3}


def test_health_ready_reports_unreachable_storage() -> None:
    app = App()
    app.add_route("/v1/health/ready", HealthResource(failing_factory()), suffix="ready")

    result = TestClient(app).simulate_get("/v1/health/ready")

    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
