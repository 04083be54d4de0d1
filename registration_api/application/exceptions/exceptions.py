"""Application layer exceptions."""

from registration_api.domain.services.registration_validator import (
    VALIDATION_ERROR_REASON,
    Rejected,
)


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class RegistrationValidationError(ApplicationError):
    """
    Raised when a registration submission fails the validation rule chain.

    Carries the exact ``reason``/``message``/``location`` triple that is
    returned to the client.
    """

    def __init__(
        self,
        message: str,
        location: str,
        reason: str = VALIDATION_ERROR_REASON,
    ):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.location = location
        self.reason = reason

    @classmethod
    def from_rejection(cls, rejection: Rejected) -> "RegistrationValidationError":
        return cls(
            message=rejection.message,
            location=rejection.location,
            reason=rejection.reason,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "reason": self.reason,
            "message": self.message,
            "location": self.location,
        }


class RegistrationStoreError(ApplicationError):
    """
    Raised when the store refuses a registration write.

    Duplicate usernames surface through this error too: the public
    contract does not tell them apart from other store failures.
    """

    def __init__(self, message: str = "User could not be created"):
        super().__init__(message, error_code="STORE_ERROR")


class UserNotFoundError(ApplicationError):
    """Raised when a user is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="USER_NOT_FOUND")
