"""Login user handler.

Flow:
1. Emit UserLoginAttempted
2. Find user by nickname (case-insensitive)
3. Check account ACTIVE
4. Verify password; unknown nickname and wrong password share one error
5. Issue a session, stamp last_active_at, commit
6. Emit UserLoginSucceeded
7. Return Success(AuthenticatedSession)
"""

from uuid import UUID

from blindgate.application.commands.identity_commands import LoginUser
from blindgate.application.dtos import AuthenticatedSession, PublicUser
from blindgate.application.services.session_issuer import SessionIssuer
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.events import (
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
)
from blindgate.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
    UserRepository,
)


class LoginUserHandler:
    """Handler for LoginUser."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        session_issuer: SessionIssuer,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._session_issuer = session_issuer
        self._uow = uow
        self._event_bus = event_bus

    async def handle(self, cmd: LoginUser) -> Result[AuthenticatedSession, DomainError]:
        """Handle login.

        Returns:
            Success(AuthenticatedSession).
            Failure(INVALID_CREDENTIALS) for an unknown nickname or wrong password.
            Failure(ACCOUNT_SUSPENDED) for a non-ACTIVE account.
        """
        nickname = cmd.nickname.strip().lower()
        await self._event_bus.publish(UserLoginAttempted(nickname=nickname))

        user = await self._user_repo.find_by_nickname(nickname)
        if user is None:
            return await self._fail(nickname, IdentityErrors.INVALID_CREDENTIALS)

        if not user.is_active():
            return await self._fail(nickname, IdentityErrors.ACCOUNT_SUSPENDED, user.id)

        if not self._password_service.verify_password(cmd.password, user.password_hash):
            return await self._fail(nickname, IdentityErrors.INVALID_CREDENTIALS, user.id)

        issued = await self._session_issuer.issue(
            user.id, user_agent=cmd.user_agent, ip_address=cmd.ip_address
        )
        user.record_login()
        await self._user_repo.update(user)
        await self._uow.commit()

        session = issued.session
        await self._event_bus.publish(
            UserLoginSucceeded(user_id=user.id, session_id=session.id)
        )
        return Success(
            value=AuthenticatedSession(
                user=PublicUser.from_user(user),
                token=session.token,
                expires_at=session.expires_at,
                cookie_max_age=issued.cookie_max_age,
            )
        )

    async def _fail(
        self, nickname: str, error: DomainError, user_id: UUID | None = None
    ) -> Failure[DomainError]:
        await self._event_bus.publish(
            UserLoginFailed(nickname=nickname, reason=error.code.value, user_id=user_id)
        )
        return Failure(error=error)
