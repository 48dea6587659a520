"""Password hashing using bcrypt.

Services depend on the ``PasswordHasher`` capability rather than on
bcrypt directly, so tests can plug in a cheaper implementation.
"""

from abc import ABC, abstractmethod

import bcrypt


class PasswordHasher(ABC):
    """One-way salted password hashing and verification."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Must return False for a mismatch and never raise for a
        well-formed hash.
        """

    def needs_rehash(self, password_hash: str) -> bool:  # noqa: ARG002
        """Whether a stored hash should be regenerated on next login."""
        return False


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation of PasswordHasher.

    Examples
    --------
    >>> hasher = BcryptPasswordHasher(rounds=4)
    >>> digest = hasher.hash("my_secure_password")
    >>> hasher.verify("my_secure_password", digest)
    True
    >>> hasher.verify("wrong_password", digest)
    False
    """

    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the hasher.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Higher values are more secure but slower; tests use 4.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was produced with a different work factor.

        bcrypt format: $2b$XX$... where XX is the cost.
        """
        try:
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError):
            pass
        return True
