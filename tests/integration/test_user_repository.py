"""Integration tests for the SQLAlchemy user repository against SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError

from registration_api.domain.entities.user import User
from registration_api.domain.exceptions import DuplicateKeyException
from registration_api.infrastructure.repositories.unit_of_work_impl import UnitOfWork

pytestmark = pytest.mark.integration


def make_user(**overrides) -> User:
    data = {
        "username": "exampleUser",
        "password_hash": "$argon2id$stored",
        "email": "example@example.com",
        "fullname": "Example User",
    }
    data.update(overrides)
    return User(**data)


@pytest.mark.asyncio
async def test_add_assigns_id_and_created_at(test_session_factory):
    async with UnitOfWork(test_session_factory) as uow:
        saved = await uow.users.add(make_user())
        await uow.commit()

    assert saved.id is not None
    assert saved.created_at is not None


@pytest.mark.asyncio
async def test_add_duplicate_username_raises_duplicate_key(test_session_factory):
    async with UnitOfWork(test_session_factory) as uow:
        await uow.users.add(make_user())
        await uow.commit()

    with pytest.raises(DuplicateKeyException) as exc_info:
        async with UnitOfWork(test_session_factory) as uow:
            await uow.users.add(make_user(email="other@example.com"))

    assert exc_info.value.key == "username"


@pytest.mark.asyncio
async def test_other_constraint_failure_is_not_reported_as_duplicate(test_session_factory):
    # email is NOT NULL in the users table
    with pytest.raises(IntegrityError):
        async with UnitOfWork(test_session_factory) as uow:
            await uow.users.add(make_user(email=None))

    async with UnitOfWork(test_session_factory) as uow:
        assert await uow.users.get_by_username("exampleUser") is None
