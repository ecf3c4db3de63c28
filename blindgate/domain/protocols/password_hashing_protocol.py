"""Password hashing protocol for domain layer.

Infrastructure provides the bcrypt adapter (BcryptPasswordService).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = self._password_service.hash_password("Password123")
        ok = self._password_service.verify_password("Password123", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (random salt per call)."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if the password matches. False for a mismatch or a malformed
            hash (never raises).
        """
        ...
