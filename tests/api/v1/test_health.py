# tests/api/v1/test_health.py
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError
from starlette.testclient import TestClient

from ecotrack.db.session import get_db
from ecotrack.main import app


def test_health(client: TestClient):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health_db(client: TestClient):
    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "component": "database"}


def test_health_db_unavailable(client: TestClient):
    broken = MagicMock()
    broken.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
    app.dependency_overrides[get_db] = lambda: broken

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert "Database unhealthy" in response.json()["error"]


def test_unknown_route_uses_error_body(client: TestClient):
    response = client.get("/api/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unexpected_errors_become_500(client: TestClient):
    broken = MagicMock()
    broken.query.side_effect = RuntimeError("boom")
    app.dependency_overrides[get_db] = lambda: broken

    response = client.get("/api/v1/leaderboard")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
