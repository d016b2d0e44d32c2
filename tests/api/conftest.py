# tests/api/conftest.py
import os
import sqlite3
import pytest
from fastapi.testclient import TestClient
from pathlib import Path

import portfolio_builder.db as db
from portfolio_builder.api.main import app
from portfolio_builder.api.dependencies import get_db, get_jwt_secret
from portfolio_builder.api.auth.security import create_access_token

TEST_JWT_SECRET = "test-secret-key-for-testing"


@pytest.fixture(autouse=True)
def shared_db(tmp_path, monkeypatch):
    """
    API-safe DB setup:
    - uses an on-disk temp DB (shared by path)
    - DOES NOT share a single sqlite Connection across threads
    """
    db_path = tmp_path / "test.db"
    monkeypatch.setenv("APP_DB_PATH", str(db_path))
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)

    # initialize schema (and template catalog) once
    conn = sqlite3.connect(db_path, check_same_thread=False)
    db.init_schema(conn)
    conn.close()

    yield

    monkeypatch.delenv("APP_DB_PATH", raising=False)
    monkeypatch.delenv("JWT_SECRET", raising=False)


@pytest.fixture
def client():
    """
    TestClient that overrides dependencies so each request gets its own connection.
    """
    db_path = Path(os.environ["APP_DB_PATH"])

    def override_get_db():
        conn = db.connect(db_path)
        db.init_schema(conn)
        try:
            yield conn
        finally:
            conn.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_jwt_secret] = lambda: TEST_JWT_SECRET

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def seed_conn():
    """Convenience: a connection you can use to seed test data."""
    conn = db.connect(os.environ["APP_DB_PATH"])
    yield conn
    conn.close()


def _headers_for(user_id: int, username: str, role: str = "user") -> dict:
    token = create_access_token(
        secret=TEST_JWT_SECRET,
        user_id=user_id,
        username=username,
        role=role,
        expires_minutes=60,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_id(seed_conn):
    return db.get_or_create_user(seed_conn, "test-user")


@pytest.fixture
def auth_headers(user_id):
    return _headers_for(user_id, "test-user")


@pytest.fixture
def other_auth_headers(seed_conn):
    other_id = db.get_or_create_user(seed_conn, "other-user")
    return _headers_for(other_id, "other-user")


@pytest.fixture
def admin_headers(seed_conn):
    admin_id = db.get_or_create_user(seed_conn, "admin-user")
    db.set_user_role(seed_conn, admin_id, "admin")
    return _headers_for(admin_id, "admin-user", role="admin")


@pytest.fixture
def auth_headers_nonexistent_user():
    """Create a token for a user ID that doesn't exist in the database."""
    return _headers_for(999999, "nonexistent")


@pytest.fixture
def template_ids(seed_conn):
    """Seeded catalog ids keyed by template name."""
    return {t["name"]: t["template_id"] for t in db.list_templates(seed_conn)}


@pytest.fixture
def create_portfolio(client, auth_headers, portfolio_data):
    """Store a portfolio through the API and return its id."""
    def _create(template_id=None, headers=None, **overrides):
        payload = {**portfolio_data, "templateId": template_id, **overrides}
        res = client.post("/portfolios", json=payload, headers=headers or auth_headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]["portfolio_id"]

    return _create
