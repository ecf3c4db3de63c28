"""Infrastructure dependency factories.

Application-scoped singletons (``lru_cache``):
- Settings
- Database (engine + session factory)
- Logging (structlog console/JSON)
- Password hashing (bcrypt), email hashing (salted sha256)
- Session tokens (JWT)
- Email (stub notifier)

Request-scoped:
- get_db_session: one AsyncSession per request
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.core.config import Settings, get_settings
from blindgate.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from blindgate.domain.protocols import (
        EmailHasherProtocol,
        EmailProtocol,
        LoggerProtocol,
        PasswordHashingProtocol,
        SessionTokenProtocol,
    )


def get_app_settings() -> Settings:
    """Settings singleton (delegates to the cached ``get_settings``)."""
    return get_settings()


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    settings = get_app_settings()
    return Database(database_url=settings.database_url, echo=settings.db_echo)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on clean exit, rolls back on exception, always closes.

    Usage:
        @router.post("/sessions")
        async def login(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_database().get_session() as session:
        yield session


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Console rendering in development, JSON lines everywhere else.
    """
    from blindgate.infrastructure.logging import ConsoleAdapter

    settings = get_app_settings()
    return ConsoleAdapter(use_json=not settings.is_development, level=settings.log_level)


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get bcrypt password service singleton (cost from BCRYPT_ROUNDS)."""
    from blindgate.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_app_settings().bcrypt_rounds)


@lru_cache()
def get_email_hasher() -> "EmailHasherProtocol":
    from blindgate.infrastructure.security import SaltedEmailHasher

    return SaltedEmailHasher()


@lru_cache()
def get_token_service() -> "SessionTokenProtocol":
    """Get JWT session token service singleton (app-scoped).

    Signature lifetime comes from JWT_EXPIRES_IN ("7d", "24h", ...).
    """
    from blindgate.infrastructure.security import JWTService

    settings = get_app_settings()
    return JWTService(
        secret_key=settings.secret_key,
        expires_in=settings.jwt_expires_delta,
        algorithm=settings.algorithm,
    )


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Delivery is out of scope, so every environment uses StubEmailService.
    Codes are written to the log only in development.
    """
    from blindgate.infrastructure.email import StubEmailService

    return StubEmailService(
        logger=get_logger(), reveal_codes=get_app_settings().is_development
    )
