"""Domain exceptions - business rule violations."""

from registration_api.domain.exceptions.domain_exceptions import (
    DomainException,
    DuplicateKeyException,
    InvalidEntityStateException,
    MalformedHashError,
    PasswordEncodingError,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "PasswordEncodingError",
    "MalformedHashError",
    "DuplicateKeyException",
]
