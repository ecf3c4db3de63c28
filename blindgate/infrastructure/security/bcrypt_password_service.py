"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol.

Security:
    - Bcrypt, cost factor from settings (default 12, ~250ms per hash)
    - Random salt per hash
    - Constant-time verification
"""

import bcrypt

_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; bcrypt>=5 raises instead of truncating
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service: PasswordHashingProtocol = get_password_service()
        password_hash = password_service.hash_password("Password123")
        password_service.verify_password("Password123", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (logarithmic; each +1 doubles time).

        Raises:
            ValueError: If cost_factor is outside 10..20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)
        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            60-character bcrypt string ($2b$<cost>$...).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True on match; False on mismatch or malformed hash.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False
