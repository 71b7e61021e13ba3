import pytest
from fastapi.testclient import TestClient

import licensing.db.database as db_module
from licensing.api.main import SERVICE_ROUTERS, app_from_env, cors_origins, create_app


def _client_for(service, db_session):
    application = create_app(service)

    def _override_get_db():
        yield db_session

    application.dependency_overrides[db_module.get_db] = _override_get_db
    return TestClient(application)


def test_single_service_app_mounts_only_its_routes(db_session):
    c = _client_for("payments", db_session)
    assert c.get("/api/payments").status_code == 200
    r = c.get("/api/customers")
    assert r.status_code == 404
    assert r.json()["success"] is False
    assert c.get("/health").json()["services"] == ["payments"]


def test_users_service_includes_auth_routes(db_session):
    c = _client_for("users", db_session)
    assert c.post("/api/auth/verify", json={"username": "a", "password": "b"}).status_code == 401
    assert c.get("/api/usersauth/nobody").status_code == 404


def test_unknown_service_name():
    with pytest.raises(ValueError):
        create_app("billing")


def test_app_from_env(monkeypatch):
    monkeypatch.setenv("SERVICE_NAME", "tenants")
    application = app_from_env()
    paths = {route.path for route in application.routes}
    assert "/api/tenants" in paths
    assert "/api/payments" not in paths
    assert set(SERVICE_ROUTERS) == {"customers", "tenants", "licenses", "notifications", "users", "payments"}


def test_cors_origins(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    assert cors_origins() == ["https://a.example", "https://b.example"]
    monkeypatch.delenv("CORS_ORIGINS")
    assert "http://localhost:3000" in cors_origins()


def test_data_error_maps_to_400():
    from sqlalchemy.exc import DataError

    application = create_app("customers")

    @application.get("/boom")
    def boom():
        raise DataError("INSERT ...", {}, Exception("value too long for type character varying(255)"))

    r = TestClient(application).get("/boom")
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert r.json()["message"] == "A value does not fit the stored column"
