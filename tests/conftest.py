# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.main import create_app

TEST_SECRET = "test-secret-key"


@pytest.fixture()
def settings() -> Settings:
    """In-memory database and a known secret; .env is not read."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        secret_key=TEST_SECRET,
        log_level="WARNING",
    )


@pytest.fixture()
def db(settings: Settings) -> Iterator[Session]:
    """A session on a fresh in-memory database, for store-level tests."""
    engine = build_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    # context manager runs the lifespan, which creates the tables
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    """Register + login a user; return headers carrying the raw token."""
    r = client.post("/register", json={"username": "alice", "password": "pw1"})
    assert r.status_code == 201
    r = client.post("/login", json={"username": "alice", "password": "pw1"})
    assert r.status_code == 200
    return {"Authorization": r.json()["token"]}
