"""Unit tests for UserDTO conversion."""

from datetime import UTC, datetime

import pytest

from registration_api.application.dtos.user_dto import UserDTO
from registration_api.domain.entities.user import User

pytestmark = pytest.mark.unit


def test_from_entity_copies_public_fields(sample_user):
    dto = UserDTO.from_entity(sample_user)

    assert dto.id == sample_user.id
    assert dto.username == "exampleUser"
    assert dto.fullname == "Example User"
    assert dto.email == "example@example.com"
    assert dto.created_at == sample_user.created_at


def test_from_entity_never_exposes_hash(sample_user):
    dumped = UserDTO.from_entity(sample_user).model_dump()

    assert set(dumped) == {"id", "username", "fullname", "email", "created_at"}


def test_from_entity_requires_id():
    user = User(username="exampleUser", password_hash="hashed", email="e@example.com")

    with pytest.raises(ValueError, match="missing id"):
        UserDTO.from_entity(user)


def test_from_entity_requires_created_at():
    user = User(username="exampleUser", password_hash="hashed", email="e@example.com", id=1)

    with pytest.raises(ValueError, match="missing created_at"):
        UserDTO.from_entity(user)


def test_from_entity_accepts_persisted_user():
    user = User(
        username="exampleUser",
        password_hash="hashed",
        email="e@example.com",
        id=7,
        created_at=datetime.now(UTC),
    )

    assert UserDTO.from_entity(user).id == 7
