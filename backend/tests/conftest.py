"""
Pytest configuration and shared fixtures.

The store is an in-memory Motor-compatible database from mongomock-motor,
created fresh for every test.  API tests override ``get_context`` so the
application lifespan (which connects to a real cluster) never runs.
Plain data builders live in ``factories.py``.
"""

from __future__ import annotations

from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.api.deps import get_context
from app.core.config import Settings
from app.core.context import AppContext
from app.core.security import IdentityClaim, create_access_token
from app.main import app

from factories import BIDDER_EMAIL, POSTER_EMAIL, SECRET, make_claim


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, JWT_SECRET_KEY=SECRET, APP_ENV="development")


@pytest.fixture
def db():
    return AsyncMongoMockClient()["coursesDB"]


@pytest.fixture
def context(settings: Settings, db) -> AppContext:
    return AppContext(settings=settings, db=db)


@pytest.fixture
def client(context: AppContext) -> Iterator[TestClient]:
    app.dependency_overrides[get_context] = lambda: context
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def poster_claim() -> IdentityClaim:
    return make_claim(POSTER_EMAIL)


@pytest.fixture
def bidder_claim() -> IdentityClaim:
    return make_claim(BIDDER_EMAIL)


@pytest.fixture
def token_for(settings: Settings):
    """Build a signed token for an email."""

    def _make(email: str, **extra: Any) -> str:
        return create_access_token({"email": email, **extra}, settings=settings)

    return _make
