"""User repository interface."""

from abc import abstractmethod

from registration_api.domain.entities.user import User
from registration_api.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """
    User-specific repository interface.

    Extends base repository with the username lookup. Implementations
    MUST enforce username uniqueness atomically inside ``add`` and raise
    DuplicateKeyException when the constraint is violated.
    """

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """
        Find a user by their username.

        Args:
            username: The unique username

        Returns:
            User if found, None otherwise
        """
        pass
