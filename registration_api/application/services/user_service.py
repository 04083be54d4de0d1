"""User service - application layer business logic."""

import asyncio
import logging
from collections.abc import Callable, Mapping
from concurrent.futures import Executor
from typing import Any

from registration_api.application.dtos.user_dto import UserDTO
from registration_api.application.exceptions import (
    RegistrationStoreError,
    RegistrationValidationError,
    UserNotFoundError,
)
from registration_api.domain.entities.user import User
from registration_api.domain.exceptions import DuplicateKeyException
from registration_api.domain.repositories.unit_of_work import IUnitOfWork
from registration_api.domain.services.password_hasher import IPasswordHasher
from registration_api.domain.services.registration_validator import (
    DEFAULT_FIELD_BOUNDS,
    FieldBounds,
    Rejected,
    validate,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    User service encapsulating the registration use case.

    This service:
    1. Validates raw submissions with the registration rule chain
    2. Hashes accepted passwords off the event loop
    3. Persists through IUnitOfWork, letting the store enforce uniqueness
    4. Returns DTOs (never the hash) to the presentation layer
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
        field_bounds: Mapping[str, FieldBounds] = DEFAULT_FIELD_BOUNDS,
        hash_executor: Executor | None = None,
    ):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            password_hasher: Password hashing service (abstraction, not concrete class)
            field_bounds: Length bounds table used by the validator
            hash_executor: Worker pool for hashing. None uses the event
                loop's default executor.

        Example:
            # Production
            service = UserService(
                uow_factory=lambda: UnitOfWork(session_factory),
                password_hasher=Argon2PasswordHasher(),
                hash_executor=ThreadPoolExecutor(max_workers=4),
            )

            # Testing
            service = UserService(
                uow_factory=lambda: FakeUnitOfWork(),
                password_hasher=FakePasswordHasher()
            )
        """
        self._uow_factory = uow_factory
        self._password_hasher = password_hasher
        self._field_bounds = field_bounds
        self._hash_executor = hash_executor

    async def register_user(self, submission: Mapping[str, Any]) -> UserDTO:
        """
        Register a new user from a raw submission.

        Steps:
        1. Run the validation rule chain; the first failing rule wins
        2. Hash the password in the worker pool
        3. Insert with the store's unique constraint on username

        There is deliberately no "does this username exist?" pre-check;
        the constrained insert is the single source of truth, so two
        concurrent registrations of the same name cannot both succeed.

        Args:
            submission: Decoded request body

        Returns:
            Created user DTO

        Raises:
            RegistrationValidationError: If a validation rule fails
            RegistrationStoreError: If the store rejects the insert
                (including a duplicate username)
            PasswordEncodingError: If the password cannot be hashed
        """
        outcome = validate(submission, self._field_bounds)
        if isinstance(outcome, Rejected):
            logger.info("Registration rejected at %s", outcome.location)
            raise RegistrationValidationError.from_rejection(outcome)

        password_hash = await self._hash_password(submission["password"])

        user = User(
            username=submission["username"],
            password_hash=password_hash,
            fullname=(submission.get("fullname") or "").strip(),
            email=submission["email"],
        )

        try:
            async with self._uow_factory() as uow:
                created_user = await uow.users.add(user)
                await uow.commit()
        except DuplicateKeyException as exc:
            logger.warning("Registration conflict for username %r", user.username)
            raise RegistrationStoreError() from exc

        logger.info("Registered user %r with id %s", created_user.username, created_user.id)
        return UserDTO.from_entity(created_user)

    async def get_user_by_id(self, user_id: int) -> UserDTO:
        """
        Retrieve user by ID.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)

            if user is None:
                raise UserNotFoundError(f"User with ID {user_id} not found")

            return UserDTO.from_entity(user)

    async def get_user_by_username(self, username: str) -> UserDTO | None:
        """Get user by username, or None."""
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_username(username)

            if user is None:
                return None

            return UserDTO.from_entity(user)

    async def verify_credentials(self, username: str, password: str) -> bool:
        """
        Check a username/password pair against the stored hash.

        Returns False both for an unknown username and for a wrong
        password, so callers cannot tell which one failed.

        Raises:
            MalformedHashError: If the stored hash is corrupt
        """
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_username(username)

        if user is None:
            return False

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._hash_executor,
            self._password_hasher.verify,
            password,
            user.password_hash,
        )

    async def _hash_password(self, plain_password: str) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self._hash_executor, self._password_hasher.hash, plain_password
        )
