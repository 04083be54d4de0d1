"""Unit of Work implementation using SQLAlchemy."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from registration_api.domain.repositories.unit_of_work import IUnitOfWork
from registration_api.infrastructure.repositories.user_repository_impl import UserRepository


class UnitOfWork(IUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work.

    Opens one session per ``async with`` block, shares it with every
    repository, and rolls back if the block raises.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork":
        self._session = self._session_factory()
        self.users = UserRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Rollback on error, then always close the session."""
        if exc_type is not None:
            await self.rollback()

        if self._session is not None:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        await self._session.rollback()
