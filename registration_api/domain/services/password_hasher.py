"""Password hashing interface - domain service abstraction.

This interface defines the contract for password hashing operations.
It belongs in the domain layer because password hashing is a BUSINESS REQUIREMENT,
not an infrastructure detail.

The domain cares that passwords must be:
1. Hashed before storage, with a fresh salt per hash
2. Verifiable later against the stored hash
3. Expensive to hash (a tunable work factor resists brute force)

The domain does NOT care which algorithm or library implements it.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    Implementations must be stateless with respect to shared memory so a
    single instance can be used from many worker threads at once.
    """

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        The implementation must:
        1. Generate a unique salt (two calls with the same input differ)
        2. Use a deliberately slow, cryptographically secure algorithm
        3. Return a string that embeds the salt and parameters

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string (format depends on implementation)

        Raises:
            PasswordEncodingError: If the input cannot be encoded (e.g. None)
        """
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against a hashed password.

        Fails closed: a mismatch returns False and never raises.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The previously hashed password to check against

        Returns:
            True if password matches, False otherwise

        Raises:
            MalformedHashError: If hashed_password is not a well-formed hash
        """
        pass
