"""Integration test fixtures.

Provides a FastAPI client wired to a real SQLite database (via aiosqlite)
and a real, lightweight Argon2 hasher. Each test gets its own database
file, so the unique username index starts empty.
"""

import asyncio
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from registration_api.infrastructure.persistence.database import (
    create_session_factory,
    create_tables,
)
from registration_api.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from registration_api.main import app
from registration_api.presentation.dependencies import (
    get_password_hasher,
    get_session_factory,
)


@pytest.fixture
def test_session_factory(tmp_path) -> async_sessionmaker:
    """Create a session factory over a fresh SQLite file with all tables."""
    # NullPool: no connection outlives the event loop that opened it
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'registration.db'}",
        poolclass=NullPool,
    )
    asyncio.run(create_tables(engine))

    return create_session_factory(engine)


@pytest.fixture
def test_password_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(time_cost=1, memory_cost=1024, parallelism=1)


@pytest.fixture
def client(test_session_factory, test_password_hasher) -> Generator[TestClient]:
    """
    Create a FastAPI test client with the test database.

    This client uses the real application but with a temporary database.
    """
    app.dependency_overrides[get_session_factory] = lambda: test_session_factory
    app.dependency_overrides[get_password_hasher] = lambda: test_password_hasher

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
