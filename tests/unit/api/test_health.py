"""Health endpoint tests."""

from unittest.mock import Mock

from fastapi.testclient import TestClient

from src.catalog.api.http.app import create_app
from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import DbSessionService


def test_liveness(memory_client: TestClient):
    response = memory_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "book-catalog"}


def test_readiness_with_memory_storage(memory_client: TestClient):
    response = memory_client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["storage"] == {"status": "healthy", "type": "memory"}


def test_readiness_with_database(database_client: TestClient):
    response = database_client.get("/health/ready")

    assert response.status_code == 200
    storage = response.json()["checks"]["storage"]
    assert storage["status"] == "healthy"
    assert storage["dialect"] == "sqlite"


def test_readiness_reports_unhealthy_database():
    database_service = Mock(spec=DbSessionService)
    database_service.health_check.return_value = False
    database_service.get_pool_status.return_value = {}
    database_service.engine.dialect.name = "postgresql"

    app = create_app(ApplicationDependencies(database_service=database_service))
    with TestClient(app) as client:
        response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["status"] == "not_ready"


def test_security_headers_and_request_id(memory_client: TestClient):
    response = memory_client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
