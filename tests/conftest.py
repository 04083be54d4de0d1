"""Pytest configuration and fixtures.

Shared fixtures used across unit tests. They wire the service with fakes:
- FakePasswordHasher: no real crypto, tests run fast
- FakeUnitOfWork: no database, each test gets a fresh store
"""

from datetime import UTC, datetime

import pytest

from registration_api.application.services.user_service import UserService
from registration_api.domain.entities.user import User
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def valid_submission() -> dict:
    """A submission that passes every registration rule."""
    return {
        "username": "exampleUser",
        "password": "examplePass",
        "fullname": "Example User",
        "email": "example@example.com",
    }


@pytest.fixture
def sample_user() -> User:
    """
    An already-registered user.

    The password_hash uses the FakePasswordHasher format: "HASHED:examplePass"
    """
    return User(
        id=1,
        username="exampleUser",
        password_hash="HASHED:examplePass",
        fullname="Example User",
        email="example@example.com",
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def fake_uow():
    """Provide a fresh, empty FakeUnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_users(sample_user):
    """Provide a FakeUnitOfWork pre-populated with sample_user."""
    return FakeUnitOfWork(initial_users=[sample_user])


@pytest.fixture
def user_service(fake_uow, fake_password_hasher):
    """UserService backed by an empty fake store."""

    def uow_factory():
        return fake_uow

    return UserService(uow_factory=uow_factory, password_hasher=fake_password_hasher)


@pytest.fixture
def user_service_with_data(fake_uow_with_users, fake_password_hasher):
    """UserService backed by a fake store that already holds sample_user."""

    def uow_factory():
        return fake_uow_with_users

    return UserService(uow_factory=uow_factory, password_hasher=fake_password_hasher)
