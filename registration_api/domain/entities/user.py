"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from registration_api.domain.exceptions import InvalidEntityStateException


@dataclass(frozen=True)
class User:
    """
    User domain entity representing a stored credential.

    This is a pure Python class with NO dependencies on SQLAlchemy,
    FastAPI, or any framework. Users are created once at registration
    and never mutated by this service, hence frozen.

    The entity only ever holds the password HASH. The plaintext password
    never reaches this class.
    """

    username: str
    password_hash: str
    email: str
    fullname: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        Submission-level rules (whitespace, lengths, types) live in the
        registration validator. These checks only guard against building
        an entity that could never be persisted.
        """
        if not self.username:
            raise InvalidEntityStateException(
                "Username cannot be empty. User must have a unique username."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. User cannot exist without authentication credentials."
            )
