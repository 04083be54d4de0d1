"""Domain layer exceptions for business rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent business rule violations and should be
    raised when domain invariants are broken.

    Examples:
        - Invalid entity state
        - Password that cannot be hashed
        - Store-level uniqueness violations
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class PasswordEncodingError(DomainException):
    """Raised when a password cannot be encoded for hashing."""

    def __init__(self, message: str = "Password could not be encoded"):
        super().__init__(message, error_code="ENCODING_ERROR")


class MalformedHashError(DomainException):
    """Raised when a stored password hash is not a well-formed hash string."""

    def __init__(self, message: str = "Stored password hash is malformed"):
        super().__init__(message, error_code="MALFORMED_HASH")


class DuplicateKeyException(DomainException):
    """
    Raised by a repository when an insert violates a unique constraint.

    The store is the single source of truth for uniqueness, so this is
    raised from the constrained insert itself, never from a pre-check.
    """

    def __init__(self, message: str = "Unique constraint violated", key: str | None = None):
        super().__init__(message, error_code="DUPLICATE_KEY")
        self.key = key
