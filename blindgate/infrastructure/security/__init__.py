"""Security adapters: password hashing, email hashing, session tokens."""

from blindgate.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from blindgate.infrastructure.security.email_hasher import SaltedEmailHasher
from blindgate.infrastructure.security.jwt_service import JWTService

__all__ = ["BcryptPasswordService", "JWTService", "SaltedEmailHasher"]
