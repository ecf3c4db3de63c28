"""Request password reset handler.

The answer is identical whether or not an account matched: same message,
same ``expires_at`` computation, no error. Only the event records the
outcome.

Flow:
1. Emit PasswordResetRequestAttempted
2. Scan ACTIVE users carrying an email hash; first recompute match wins
3. If matched: upsert the reset record by the user's hash (fresh code),
   commit, send the code
4. Emit PasswordResetRequestSucceeded(matched=...)
"""

from datetime import UTC, datetime, timedelta

from uuid_extensions import uuid7

from blindgate.application.commands.identity_commands import RequestPasswordReset
from blindgate.application.dtos import PasswordResetRequestResult
from blindgate.application.services.one_time_secrets import new_verification_code
from blindgate.core.errors import DomainError
from blindgate.core.result import Result, Success
from blindgate.domain.entities.password_reset import PasswordReset
from blindgate.domain.entities.user import User
from blindgate.domain.events import (
    PasswordResetRequestAttempted,
    PasswordResetRequestSucceeded,
)
from blindgate.domain.protocols import (
    EmailHasherProtocol,
    EmailProtocol,
    EventBusProtocol,
    PasswordResetRepository,
    UnitOfWorkProtocol,
    UserRepository,
)
from blindgate.domain.validators import email_domain

RESET_REQUEST_MESSAGE = "If the email is registered, a verification code will be sent."


class RequestPasswordResetHandler:
    """Handler for RequestPasswordReset."""

    def __init__(
        self,
        user_repo: UserRepository,
        reset_repo: PasswordResetRepository,
        hasher: EmailHasherProtocol,
        email_service: EmailProtocol,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
        *,
        code_ttl: timedelta,
    ) -> None:
        self._user_repo = user_repo
        self._reset_repo = reset_repo
        self._hasher = hasher
        self._email_service = email_service
        self._uow = uow
        self._event_bus = event_bus
        self._code_ttl = code_ttl

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequestResult, DomainError]:
        """Always returns Success with the generic message."""
        await self._event_bus.publish(
            PasswordResetRequestAttempted(email_domain=email_domain(cmd.email))
        )
        expires_at = datetime.now(UTC) + self._code_ttl

        matched = self._match_user(await self._user_repo.list_active_with_email(), cmd.email)
        user = matched[0] if matched is not None else None
        if matched is not None:
            _, email_hash, email_salt = matched
            code = new_verification_code()
            await self._upsert_reset(email_hash, email_salt, code, expires_at)
            await self._uow.commit()
            await self._email_service.send_password_reset_code(cmd.email, code)

        await self._event_bus.publish(
            PasswordResetRequestSucceeded(
                matched=user is not None,
                user_id=user.id if user is not None else None,
            )
        )
        return Success(
            value=PasswordResetRequestResult(
                message=RESET_REQUEST_MESSAGE, expires_at=expires_at
            )
        )

    def _match_user(
        self, users: list[User], email: str
    ) -> tuple[User, str, str] | None:
        """First user whose stored hash matches, with that hash and salt."""
        for user in users:
            if user.email_hash is None or user.email_salt is None:
                continue
            if self._hasher.matches(email, user.email_salt, user.email_hash):
                return user, user.email_hash, user.email_salt
        return None

    async def _upsert_reset(
        self, email_hash: str, email_salt: str, code: str, expires_at: datetime
    ) -> None:
        existing = await self._reset_repo.find_by_email_hash(email_hash)
        if existing is not None:
            existing.reissue_code(code, expires_at)
            await self._reset_repo.update(existing)
            return

        await self._reset_repo.save(
            PasswordReset(
                id=uuid7(),
                email_hash=email_hash,
                email_salt=email_salt,
                code=code,
                code_expires_at=expires_at,
            )
        )
