"""User repository implementation using SQLAlchemy."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from registration_api.domain.entities.user import User
from registration_api.domain.exceptions import DuplicateKeyException
from registration_api.domain.repositories.user_repository import IUserRepository
from registration_api.infrastructure.persistence.models.user_model import UserModel


def _is_unique_violation(exc: IntegrityError) -> bool:
    # PostgreSQL: "duplicate key value violates unique constraint ..."
    # SQLite: "UNIQUE constraint failed: users.username"
    return "unique" in str(exc.orig).lower()


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    Returns domain entities, never exposing ORM models to the application
    layer, and translates unique-constraint failures into
    DuplicateKeyException.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
        """
        self._session = session

    async def get_by_id(self, id: int) -> Optional[User]:
        """Get user by ID."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.id == id)
        )
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return user_model.to_entity()

    async def add(self, entity: User) -> User:
        """
        Add a new user.

        The flush sends the INSERT immediately, so a unique-constraint
        violation surfaces here as IntegrityError rather than at commit.
        """
        user_model = UserModel.from_entity(entity)

        self._session.add(user_model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Other constraint failures propagate as database errors.
            if not _is_unique_violation(exc):
                raise
            raise DuplicateKeyException(
                f"Username {entity.username!r} is already taken", key="username"
            ) from exc
        await self._session.refresh(user_model)

        return user_model.to_entity()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        result = await self._session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return user_model.to_entity()
