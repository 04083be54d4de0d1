"""Application layer exceptions."""

from registration_api.application.exceptions.exceptions import (
    ApplicationError,
    RegistrationStoreError,
    RegistrationValidationError,
    UserNotFoundError,
)

__all__ = [
    "ApplicationError",
    "RegistrationValidationError",
    "RegistrationStoreError",
    "UserNotFoundError",
]
