# tests/api/v1/test_auth.py
import pytest
from starlette.testclient import TestClient

from tests.utils import factories
from tests.utils.auth import (
    get_authentication_headers,
    get_expired_authentication_headers,
    get_forged_authentication_headers,
)


def test_register_returns_token_and_user(client: TestClient):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": "New Student", "email": "new@test.com", "password": "s3cret"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["user"]["email"] == "new@test.com"
    assert data["user"]["role"] == "user"
    assert data["user"]["greenPoints"] == 0
    assert "passwordHash" not in data["user"]


def test_register_duplicate_email(client: TestClient, student):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": "Again", "email": student.email, "password": "x"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "User already exists"}


def test_register_missing_fields(client: TestClient):
    response = client.post("/api/v1/auth/register", json={"email": "a@b.com"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_login_and_me(client: TestClient, db):
    factories.create_user(db, email="login@test.com", password="correct-horse")

    response = client.post(
        "/api/v1/auth/login",
        json={"email": "login@test.com", "password": "correct-horse"},
    )
    assert response.status_code == 200
    token = response.json()["token"]

    me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "login@test.com"


def test_login_wrong_password(client: TestClient, student):
    response = client.post(
        "/api/v1/auth/login", json={"email": student.email, "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_me_requires_token(client: TestClient):
    response = client.get("/api/v1/auth/me")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_me_rejects_forged_and_expired_tokens(client: TestClient, student):
    forged = client.get("/api/v1/auth/me", headers=get_forged_authentication_headers(student.id))
    expired = client.get("/api/v1/auth/me", headers=get_expired_authentication_headers(student.id))

    assert forged.status_code == 401
    assert forged.json() == {"error": "Invalid token"}
    assert expired.status_code == 401


def test_me_for_unknown_user(client: TestClient):
    response = client.get(
        "/api/v1/auth/me", headers=get_authentication_headers("usr_aaaaaaaaaaaa")
    )

    assert response.status_code == 401


@pytest.mark.parametrize("password", ["x" * 80, "é" * 40])
def test_register_and_login_with_password_over_72_bytes(client: TestClient, password):
    assert len(password.encode("utf-8")) == 80

    registered = client.post(
        "/api/v1/auth/register",
        json={"name": "Long Pass", "email": "long@test.com", "password": password},
    )
    assert registered.status_code == 200
    assert registered.json()["token"]

    login = client.post(
        "/api/v1/auth/login", json={"email": "long@test.com", "password": password}
    )
    assert login.status_code == 200
    assert login.json()["user"]["email"] == "long@test.com"


def test_login_compares_only_first_72_bytes(client: TestClient, db):
    factories.create_user(db, email="trunc@test.com", password="a" * 72 + "first")

    response = client.post(
        "/api/v1/auth/login",
        json={"email": "trunc@test.com", "password": "a" * 72 + "second"},
    )

    assert response.status_code == 200
