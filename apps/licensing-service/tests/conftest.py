import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-at-least-32-bytes!!")
os.environ.setdefault("JWT_ISSUER", "license-management-tests")
os.environ.setdefault("JWT_AUDIENCE", "license-management-tests")

import licensing.db.database as db_module  # noqa: E402
from licensing.api.main import create_app  # noqa: E402
from licensing.db import models  # noqa: E402


# Per-test schema on the in-memory SQLite engine (StaticPool keeps one connection)
@pytest.fixture
def db_session():
    models.Base.metadata.create_all(bind=db_module.engine)
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=db_module.engine)


# Backwards compatibility: some tests read nicer with a 'db' fixture name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def app(db_session):
    application = create_app()

    def _override_get_db():
        yield db_session

    application.dependency_overrides[db_module.get_db] = _override_get_db
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_user(client):
    def _make(username="alice", password="s3cret-pass", role="User", tenant_id=None, email=None):
        payload = {
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
            "role": role,
            "tenant_id": tenant_id,
        }
        r = client.post("/api/users", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _make


@pytest.fixture
def make_payment(client):
    def _make(**overrides):
        payload = {
            "license_id": 1,
            "amount": "49.99",
            "currency": "USD",
            "payment_method": "CreditCard",
        }
        payload.update(overrides)
        r = client.post("/api/payments", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _make
