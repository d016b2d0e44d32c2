import os

import jwt


def _register(client, username="alice", password="Abcd1234", **extra):
    return client.post("/auth/register", json={"username": username, "password": password, **extra})


def test_register_success(client):
    res = _register(client, email="alice@example.com")
    assert res.status_code == 201
    data = res.json()
    assert data["user_id"] > 0
    assert data["username"] == "alice"
    assert data["role"] == "user"


def test_register_rejects_weak_password_422(client):
    res = _register(client, password="abcde")
    assert res.status_code == 422


def test_register_rejects_blank_username_422(client):
    res = _register(client, username="   ")
    assert res.status_code == 422


def test_register_duplicate_username_400(client):
    assert _register(client).status_code == 201
    res = _register(client, username="ALICE")
    assert res.status_code == 400
    assert res.json()["detail"] == "Username already taken"


def test_login_returns_token(client):
    user_id = _register(client).json()["user_id"]

    res = client.post("/auth/login", json={"username": "alice", "password": "Abcd1234"})
    assert res.status_code == 200
    body = res.json()
    assert body["token_type"] == "bearer"

    payload = jwt.decode(body["access_token"], os.environ["JWT_SECRET"], algorithms=["HS256"])
    assert payload["sub"] == str(user_id)
    assert payload["username"] == "alice"
    assert payload["role"] == "user"


def test_login_wrong_password_401(client):
    _register(client)
    res = client.post("/auth/login", json={"username": "alice", "password": "Wrong1234"})
    assert res.status_code == 401


def test_login_unknown_user_401(client):
    res = client.post("/auth/login", json={"username": "nobody", "password": "Abcd1234"})
    assert res.status_code == 401


def test_token_from_login_works_on_protected_route(client):
    _register(client)
    token = client.post("/auth/login", json={"username": "alice", "password": "Abcd1234"}).json()["access_token"]

    res = client.get("/portfolios", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
