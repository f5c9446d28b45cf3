from fastapi.testclient import TestClient
import logging
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from app.main import app
from app.core.config import Settings
from app.core.logging import resolve_log_level, setup_logging
from app.dependencies import get_organization_service

def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}

def test_invalid_body_type_is_400(client):
    response = client.post("/orgs", json={"name": ["not", "a", "string"]})
    assert response.status_code == 400
    assert "name" in response.json()["error"]

def test_missing_body_is_400(client):
    response = client.post("/orgs")
    assert response.status_code == 400
    assert "error" in response.json()

def test_non_integer_id_is_400(client):
    response = client.get("/orgs/abc")
    assert response.status_code == 400
    assert "org_id" in response.json()["error"]

def test_unknown_route_uses_error_shape(client):
    response = client.get("/nope")
    assert response.status_code == 404
    assert "error" in response.json()

def test_storage_failure_is_500():
    class BrokenService:
        def list_all(self):
            raise RuntimeError("connection refused")

    app.dependency_overrides[get_organization_service] = lambda: BrokenService()
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/orgs")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "internal_error", "details": "connection refused"}

def test_cors_headers(client):
    response = client.get("/healthz", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"

def test_database_url_from_pg_settings():
    settings = Settings(
        PGHOST="db.internal", PGPORT=6543, PGUSER="aap", PGPASSWORD="p@ss", PGDATABASE="sim",
        DATABASE_URL=None,
    )
    url = make_url(settings.database_url)
    assert url.drivername == "postgresql+psycopg"
    assert url.host == "db.internal"
    assert url.port == 6543
    assert url.username == "aap"
    assert url.password == "p@ss"
    assert url.database == "sim"

def test_database_url_override():
    settings = Settings(DATABASE_URL="sqlite:///./sim.db")
    assert settings.database_url == "sqlite:///./sim.db"

def test_unparseable_json_message(client):
    response = client.post("/orgs", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "JSON decode error"}

def test_storage_failure_keeps_cors_headers():
    class UnreachableStore:
        def list_all(self):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    app.dependency_overrides[get_organization_service] = lambda: UnreachableStore()
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/orgs", headers={"Origin": "http://example.com"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.json()["error"] == "internal_error"
    assert "connection refused" in response.json()["details"]

def test_log_level_resolution():
    assert resolve_log_level(Settings(DEBUG=False, LOG_LEVEL=None)) == logging.INFO
    assert resolve_log_level(Settings(DEBUG=True, LOG_LEVEL=None)) == logging.DEBUG
    assert resolve_log_level(Settings(DEBUG=True, LOG_LEVEL="warning")) == logging.WARNING
    assert resolve_log_level(Settings(DEBUG=False, LOG_LEVEL="bogus")) == logging.INFO

def test_setup_logging_quiets_configured_loggers():
    settings = Settings(LOG_LEVEL="DEBUG", QUIET_LOGGERS=["aapsim.test.noisy"])
    assert setup_logging(settings) == logging.DEBUG
    assert logging.getLogger("aapsim.test.noisy").level == logging.WARNING
    assert logging.getLogger().level == logging.DEBUG
    setup_logging()
