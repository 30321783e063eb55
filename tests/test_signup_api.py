"""Integration tests covering account signup and bearer sessions."""
from __future__ import annotations

import os
from typing import Iterator
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete, select

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_artbase.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from artbase.database import Base, SessionLocal, engine  # noqa: E402
from artbase.main import app  # noqa: E402
from artbase.models import Post, User  # noqa: E402


@pytest.fixture(scope="module", autouse=True)
def _create_schema() -> Iterator[None]:
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_database() -> Iterator[None]:
    with SessionLocal() as session:
        session.execute(delete(Post))
        session.execute(delete(User))
        session.commit()
    yield


def _signup(client: TestClient, email: str, password: str = "password123", name: str | None = None):
    return client.post("/api/signup", json={"email": email, "password": password, "name": name})


def test_signup_returns_identity_without_password() -> None:
    with TestClient(app) as client:
        response = _signup(client, "artist@example.com", name="Sarah")
        assert response.status_code == 201, response.text
        payload = response.json()
        assert set(payload) == {"id", "email", "name"}
        assert payload["email"] == "artist@example.com"
        assert payload["name"] == "Sarah"
        UUID(payload["id"])

    with SessionLocal() as session:
        user = session.scalar(select(User).where(User.email == "artist@example.com"))
        assert user is not None
        assert user.hashed_password != "password123"
        assert user.hashed_password.startswith("$2")


def test_signup_normalizes_email_and_rejects_duplicates() -> None:
    with TestClient(app) as client:
        first = _signup(client, "  Maria@Example.COM ")
        assert first.status_code == 201, first.text
        assert first.json()["email"] == "maria@example.com"

        second = _signup(client, "maria@example.com")
        assert second.status_code == 409
        assert second.json() == {"error": "Email already in use"}


@pytest.mark.parametrize(
    "body",
    [
        {"email": "someone@example.com"},
        {"password": "password123"},
        {"email": "   ", "password": "password123"},
        {},
    ],
)
def test_signup_requires_email_and_password(body: dict) -> None:
    with TestClient(app) as client:
        response = client.post("/api/signup", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Email and password required"}

    with SessionLocal() as session:
        assert session.scalars(select(User)).first() is None


def test_login_issues_token_and_session_resolves_identity() -> None:
    with TestClient(app) as client:
        created = _signup(client, "photo@example.com", name="John").json()

        login = client.post("/api/auth/login", json={"email": "PHOTO@example.com", "password": "password123"})
        assert login.status_code == 200, login.text
        body = login.json()
        assert body["token_type"] == "bearer"
        assert body["user"]["id"] == created["id"]

        session = client.get("/api/auth/session", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert session.status_code == 200
        assert session.json()["user"]["email"] == "photo@example.com"

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
        assert me.status_code == 200
        assert me.json()["id"] == created["id"]


def test_login_rejects_wrong_password() -> None:
    with TestClient(app) as client:
        _signup(client, "photo@example.com")
        response = client.post("/api/auth/login", json={"email": "photo@example.com", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}


def test_session_without_token_is_empty() -> None:
    with TestClient(app) as client:
        assert client.get("/api/auth/session").json() == {"user": None}
        assert client.get("/api/auth/session", headers={"Authorization": "Bearer garbage"}).json() == {"user": None}
        assert client.get("/api/auth/me").status_code == 401
