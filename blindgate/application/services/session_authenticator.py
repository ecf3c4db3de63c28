"""Resolve a bearer token to the caller's identity.

token -> signature check -> session row -> user -> IdentityContext.
Every failure between the signature and the user lookup is reported as
SESSION_EXPIRED so callers cannot tell a forged token from a revoked one.
"""

from datetime import UTC, datetime

from blindgate.application.dtos import IdentityContext
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.protocols import (
    LoggerProtocol,
    SessionRepository,
    SessionTokenProtocol,
    UnitOfWorkProtocol,
    UserRepository,
)


class SessionAuthenticator:
    """Mandatory and optional request authentication.

    Example:
        >>> result = await authenticator.authenticate(token)
        >>> match result:
        ...     case Success(value=identity):
        ...         ...
        ...     case Failure(error=error):
        ...         ...
    """

    def __init__(
        self,
        token_service: SessionTokenProtocol,
        session_repo: SessionRepository,
        user_repo: UserRepository,
        uow: UnitOfWorkProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._token_service = token_service
        self._session_repo = session_repo
        self._user_repo = user_repo
        self._uow = uow
        self._logger = logger

    async def authenticate(self, token: str | None) -> Result[IdentityContext, DomainError]:
        """Authenticate a request token.

        Side Effects:
            Refreshes ``last_used_at`` on the session and commits. The
            session's ``expires_at`` is left unchanged.
        """
        if not token:
            return Failure(error=IdentityErrors.UNAUTHENTICATED)

        decoded = self._token_service.decode_session_token(token)
        if isinstance(decoded, Failure):
            self._logger.debug("session_token_rejected", reason=decoded.error)
            return Failure(error=IdentityErrors.SESSION_EXPIRED)
        claims = decoded.value

        session = await self._session_repo.find_by_id(claims.session_id)
        if session is None or session.user_id != claims.user_id or session.is_expired():
            return Failure(error=IdentityErrors.SESSION_EXPIRED)

        user = await self._user_repo.find_by_id(session.user_id)
        if user is None:
            return Failure(error=IdentityErrors.SESSION_EXPIRED)
        if not user.is_active():
            return Failure(error=IdentityErrors.ACCOUNT_SUSPENDED)

        await self._session_repo.update_last_used(session.id, datetime.now(UTC))
        await self._uow.commit()

        return Success(
            value=IdentityContext(
                id=user.id,
                nickname=user.nickname,
                company_id=user.company_id,
                company_verified=user.company_verified,
                role=user.role,
                session_id=session.id,
            )
        )

    async def authenticate_optional(self, token: str | None) -> IdentityContext | None:
        """Same checks as ``authenticate``; any failure yields None."""
        if not token:
            return None
        match await self.authenticate(token):
            case Success(value=identity):
                return identity
            case _:
                return None
