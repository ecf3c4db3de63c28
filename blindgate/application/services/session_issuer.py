"""Token/Session Issuer.

Creates the session row and signs its bearer token. The row is the source of
truth: the token only carries ``user_id`` and ``session_id``, and the
authenticator rejects it once the row is deleted or past ``expires_at``.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from blindgate.application.services.policy_gate import PolicyGate
from blindgate.domain.entities.session import Session
from blindgate.domain.protocols import SessionRepository, SessionTokenProtocol


@dataclass(frozen=True, kw_only=True)
class IssuedSession:
    """A persisted (flushed) session and its cookie lifetime in seconds."""

    session: Session
    cookie_max_age: int


class SessionIssuer:
    """Issue sessions with a lifetime from the ``sessionExpireDays`` policy."""

    def __init__(
        self,
        session_repo: SessionRepository,
        token_service: SessionTokenProtocol,
        policy: PolicyGate,
    ) -> None:
        self._session_repo = session_repo
        self._token_service = token_service
        self._policy = policy

    async def issue(
        self,
        user_id: UUID,
        *,
        user_agent: str | None = None,
        ip_address: str | None = None,
    ) -> IssuedSession:
        """Create and flush a session. The caller commits.

        Args:
            user_id: Owning user.
            user_agent: Client user agent.
            ip_address: Client IP.

        Returns:
            IssuedSession with the signed token on ``session.token``.
        """
        days = await self._policy.session_expire_days()
        now = datetime.now(UTC)
        session_id = uuid7()
        session = Session(
            id=session_id,
            user_id=user_id,
            token=self._token_service.create_session_token(user_id, session_id),
            expires_at=now + timedelta(days=days),
            user_agent=user_agent,
            ip_address=ip_address,
            last_used_at=now,
            created_at=now,
        )
        await self._session_repo.save(session)
        return IssuedSession(session=session, cookie_max_age=days * 86400)
