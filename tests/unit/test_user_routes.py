from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import foodhub.api.routes.users as users_route
from foodhub.api.main import app
from foodhub.user.application.use_cases.register_user import GetUser, RegisterUser
from foodhub.user.infrastructure.db.models import Base
from foodhub.user.infrastructure.db.repositories.user_repo import SqlAlchemyUserRepository


@pytest.fixture
def client(monkeypatch) -> TestClient:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    monkeypatch.setattr(
        users_route,
        "_register_user_use_case",
        lambda: RegisterUser(SqlAlchemyUserRepository(engine=engine)),
    )
    monkeypatch.setattr(
        users_route,
        "_get_user_use_case",
        lambda: GetUser(SqlAlchemyUserRepository(engine=engine)),
    )
    return TestClient(app)


def test_register_and_fetch_user(client: TestClient) -> None:
    created = client.post("/v1/users", json={"email": "Ada@Example.com", "displayName": "Ada"})

    assert created.status_code == 201
    body = created.json()
    assert body["email"] == "ada@example.com"

    fetched = client.get(f"/v1/users/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["displayName"] == "Ada"


def test_duplicate_email_is_conflict(client: TestClient) -> None:
    client.post("/v1/users", json={"email": "ada@example.com", "displayName": "Ada"})

    response = client.post("/v1/users", json={"email": "ADA@example.com", "displayName": "Ada"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_REGISTERED"


def test_unknown_user_is_404(client: TestClient) -> None:
    response = client.get("/v1/users/usr_missing")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


def test_invalid_email_is_422(client: TestClient) -> None:
    response = client.post("/v1/users", json={"email": "not-an-email", "displayName": "Ada"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "DOMAIN_VALIDATION_FAILED"
