"""Tests for health check endpoints.

Verifies health check functionality including basic, detailed, readiness, and liveness probes.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from orgledger.database import Base, build_engine, build_session_factory, get_db
from orgledger.main import app


@pytest.fixture
def test_db():
    """Create test database."""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    TestingSessionLocal = build_session_factory(engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield engine
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def client(test_db):
    """FastAPI test client."""
    return TestClient(app)


class TestBasicHealthCheck:
    def test_health_endpoint_returns_correct_structure(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "service": "org-ledger",
            "version": "1.0.0",
        }

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "req-42"})
        assert response.headers["X-Request-ID"] == "req-42"

    def test_request_id_generated(self, client):
        response = client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 32


class TestDetailedHealthCheck:
    def test_detailed_health_all_healthy(self, client):
        response = client.get("/health/detailed")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["checks"]["database"]["healthy"] is True
        assert "Database connected" in data["checks"]["database"]["message"]
        assert data["checks"]["schema"]["healthy"] is True

    def test_detailed_health_reports_missing_tables(self, client, test_db):
        Base.metadata.tables["sales"].drop(test_db)

        data = client.get("/health/detailed").json()

        assert data["status"] == "degraded"
        assert data["checks"]["schema"]["healthy"] is False
        assert "sales" in data["checks"]["schema"]["message"]

    @patch("orgledger.health.check_database")
    def test_detailed_health_database_failure(self, mock_check, client):
        mock_check.return_value = {"healthy": False, "message": "Database error: down"}

        data = client.get("/health/detailed").json()

        assert data["status"] == "degraded"
        assert data["checks"]["database"]["healthy"] is False


class TestProbes:
    def test_readiness(self, client):
        response = client.get("/health/ready")
        assert response.status_code == 200
        assert response.json() == {"ready": True}

    def test_readiness_database_down(self, client):
        with patch(
            "sqlalchemy.orm.Session.execute",
            side_effect=OperationalError("SELECT 1", {}, Exception("down")),
        ):
            response = client.get("/health/ready")
        assert response.status_code == 503

    def test_liveness(self, client):
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json() == {"alive": True}
