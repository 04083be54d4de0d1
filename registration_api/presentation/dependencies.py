"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

This is where we decide:
- Use Argon2PasswordHasher with the work factor from Settings
- Run hashing on a bounded thread pool sized from Settings
- Use UnitOfWork with SQLAlchemy
- Feed the validator the length bounds from Settings

The application layer doesn't know or care about these choices - it only
knows about interfaces.
"""

from concurrent.futures import ThreadPoolExecutor

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncEngine

from registration_api.domain.repositories.unit_of_work import IUnitOfWork
from registration_api.domain.services.password_hasher import IPasswordHasher
from registration_api.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from registration_api.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from registration_api.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from registration_api.infrastructure.config.settings import Settings, get_settings
from registration_api.application.services.user_service import UserService


# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None
_password_hasher: IPasswordHasher | None = None
_hash_executor: ThreadPoolExecutor | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create session factory singleton."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


def get_password_hasher(settings: Settings = Depends(get_settings)) -> IPasswordHasher:
    """
    Dependency that provides password hasher.

    This is a SINGLETON - password hashers are stateless and thread-safe,
    so one instance is shared by every worker thread.

    Note:
        In tests, this dependency can be overridden with FakePasswordHasher:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = Argon2PasswordHasher(
            time_cost=settings.argon2_time_cost,
            memory_cost=settings.argon2_memory_cost,
            parallelism=settings.argon2_parallelism,
        )
    return _password_hasher


def get_hash_executor(settings: Settings = Depends(get_settings)) -> ThreadPoolExecutor:
    """
    Dependency that provides the bounded worker pool for password hashing.

    Hashing is CPU-bound and slow on purpose. Running it here keeps the
    event loop free for request intake, and the pool size caps how many
    hashes run concurrently.
    """
    global _hash_executor
    if _hash_executor is None:
        _hash_executor = ThreadPoolExecutor(
            max_workers=settings.password_hash_workers,
            thread_name_prefix="password-hash",
        )
    return _hash_executor


def shutdown_hash_executor() -> None:
    """Stop the hashing pool (called on application shutdown)."""
    global _hash_executor
    if _hash_executor is not None:
        _hash_executor.shutdown(wait=True)
        _hash_executor = None


def get_user_service(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    hash_executor: ThreadPoolExecutor = Depends(get_hash_executor),
    session_factory: async_sessionmaker = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
) -> UserService:
    """
    Dependency that provides UserService.

    Dependency Graph:
        FastAPI endpoint
            → get_user_service()
                → get_password_hasher() → Argon2PasswordHasher
                → get_hash_executor() → ThreadPoolExecutor
                → get_session_factory() → get_database_engine() → Settings
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return UserService(
        uow_factory=uow_factory,
        password_hasher=password_hasher,
        field_bounds=settings.field_bounds,
        hash_executor=hash_executor,
    )
