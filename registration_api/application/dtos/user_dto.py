"""User DTOs for application layer using Pydantic."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from registration_api.domain.entities.user import User


class UserDTO(BaseModel):
    """
    DTO for returning a stored user to the presentation layer.

    Deliberately has no password or password_hash field, so the hash
    can never leak into a response body.
    """

    id: int
    username: str
    fullname: str
    email: str
    created_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "exampleUser",
                "fullname": "Example User",
                "email": "example@example.com",
                "created_at": "2024-01-01T00:00:00Z",
            }
        },
    )

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """
        Convert a PERSISTED domain entity to DTO.

        PRECONDITION: The user entity MUST be persisted (have id and created_at).

        Args:
            user: User domain entity (must be persisted)

        Returns:
            UserDTO instance

        Raises:
            ValueError: If the entity is not persisted
        """
        if user.id is None:
            raise ValueError(
                "Cannot create UserDTO from non-persisted entity: missing id. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        if user.created_at is None:
            raise ValueError(
                "Cannot create UserDTO from non-persisted entity: missing created_at. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        return cls(
            id=user.id,
            username=user.username,
            fullname=user.fullname,
            email=user.email,
            created_at=user.created_at,
        )
