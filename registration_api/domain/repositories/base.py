"""Base repository interfaces following Clean Architecture."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

# Generic type for domain entities
T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Base repository interface for create-and-find access.

    Stored records are write-once here: there is no update or delete.

    Type Parameters:
        T: The domain entity type this repository manages
    """

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve an entity by its ID.

        Args:
            id: The unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Add a new entity.

        Args:
            entity: The entity to add

        Returns:
            The added entity with generated fields (like ID)

        Raises:
            DuplicateKeyException: If a unique constraint rejects the insert
        """
        pass
