"""Argon2 password hasher implementation using pwdlib.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher interface)
defines WHAT we need (hash and verify operations), while this implementation
defines HOW we do it (Argon2id via pwdlib, with argon2-cffi for hash parsing).

Dependency flow:
    UserService (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)
"""

from argon2 import extract_parameters
from argon2.exceptions import InvalidHashError
from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher

from registration_api.domain.exceptions import MalformedHashError, PasswordEncodingError
from registration_api.domain.services.password_hasher import IPasswordHasher

DEFAULT_TIME_COST = 3
DEFAULT_MEMORY_COST = 65536
DEFAULT_PARALLELISM = 4


class Argon2PasswordHasher(IPasswordHasher):
    """
    Production password hasher using Argon2id algorithm via pwdlib.

    Argon2id is recommended by OWASP for password storage. Its cost is
    intentional: every hash burns ``memory_cost`` KiB for ``time_cost``
    passes, which is what makes offline brute force expensive. Callers
    that cannot afford to block should run ``hash`` in a worker pool.

    Configuration (all tunable through Settings):
    - time_cost: number of passes (default 3)
    - memory_cost: memory in KiB (default 65536, i.e. 64 MB)
    - parallelism: lanes (default 4)

    Usage:
        hasher = Argon2PasswordHasher()

        hashed = hasher.hash("user_password_123")
        # Returns: "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"

        hasher.verify("user_password_123", hashed)  # True
        hasher.verify("wrong_password", hashed)     # False
        hasher.verify("anything", "not-a-hash")     # raises MalformedHashError
    """

    def __init__(
        self,
        time_cost: int = DEFAULT_TIME_COST,
        memory_cost: int = DEFAULT_MEMORY_COST,
        parallelism: int = DEFAULT_PARALLELISM,
    ):
        """
        Initialize Argon2 password hasher with the given work factor.

        Args:
            time_cost: Number of iterations
            memory_cost: Memory usage in KiB
            parallelism: Number of parallel lanes
        """
        self._password_hash = PasswordHash(
            (
                Argon2Hasher(
                    time_cost=time_cost,
                    memory_cost=memory_cost,
                    parallelism=parallelism,
                ),
            )
        )

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password using Argon2id.

        The resulting hash is self-contained: algorithm identifier,
        version, parameters, random salt and derived key.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Argon2 hash string

        Raises:
            PasswordEncodingError: If the password is not a string or
                cannot be UTF-8 encoded (e.g. lone surrogates)
        """
        if not isinstance(plain_password, str):
            raise PasswordEncodingError(
                f"Password must be a string, got {type(plain_password).__name__}"
            )

        try:
            plain_password.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise PasswordEncodingError("Password is not valid UTF-8 text") from exc

        return self._password_hash.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain text password against an Argon2 hash.

        Re-derives the key with the salt and parameters embedded in the
        hash and compares in constant time.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The Argon2 hash to check against

        Returns:
            True if the password matches, False otherwise (including a
            non-string plain_password)

        Raises:
            MalformedHashError: If hashed_password cannot be parsed as an
                Argon2 hash
        """
        if not isinstance(hashed_password, str):
            raise MalformedHashError()

        try:
            extract_parameters(hashed_password)
        except InvalidHashError as exc:
            raise MalformedHashError() from exc

        if not isinstance(plain_password, str):
            return False

        try:
            is_valid, _ = self._password_hash.verify_and_update(
                plain_password, hashed_password
            )
        except UnknownHashError as exc:
            # Parsable Argon2 string but not a variant this hasher accepts
            raise MalformedHashError() from exc

        return is_valid
