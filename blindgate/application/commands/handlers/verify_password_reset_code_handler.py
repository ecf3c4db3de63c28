"""Verify password reset code handler.

Scans unverified, unused, unexpired reset records holding the code and
recomputes each record's hash from the supplied email; the first match is
marked verified and gets a continuation token.
"""

from datetime import UTC, datetime, timedelta

from blindgate.application.commands.identity_commands import VerifyPasswordResetCode
from blindgate.application.dtos import ContinuationTokenResult
from blindgate.application.services.one_time_secrets import new_continuation_token
from blindgate.application.services.verification_records import first_match
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.events import (
    EmailVerificationAttempted,
    EmailVerificationFailed,
    EmailVerificationSucceeded,
)
from blindgate.domain.protocols import (
    EmailHasherProtocol,
    EventBusProtocol,
    PasswordResetRepository,
    UnitOfWorkProtocol,
)

PASSWORD_RESET_KIND = "PASSWORD_RESET"


class VerifyPasswordResetCodeHandler:
    """Handler for VerifyPasswordResetCode."""

    def __init__(
        self,
        reset_repo: PasswordResetRepository,
        hasher: EmailHasherProtocol,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
        *,
        token_ttl: timedelta,
    ) -> None:
        self._reset_repo = reset_repo
        self._hasher = hasher
        self._uow = uow
        self._event_bus = event_bus
        self._token_ttl = token_ttl

    async def handle(
        self, cmd: VerifyPasswordResetCode
    ) -> Result[ContinuationTokenResult, DomainError]:
        await self._event_bus.publish(EmailVerificationAttempted(kind=PASSWORD_RESET_KIND))

        candidates = await self._reset_repo.list_pending_with_code(cmd.code)
        reset = first_match(
            (candidate for candidate in candidates if candidate.is_code_valid(cmd.code)),
            cmd.email,
            self._hasher,
        )
        if reset is None:
            await self._event_bus.publish(
                EmailVerificationFailed(
                    kind=PASSWORD_RESET_KIND,
                    reason=IdentityErrors.INVALID_OR_EXPIRED_CODE.code.value,
                )
            )
            return Failure(error=IdentityErrors.INVALID_OR_EXPIRED_CODE)

        token = ContinuationTokenResult(
            continuation_token=new_continuation_token(),
            expires_at=datetime.now(UTC) + self._token_ttl,
        )
        reset.mark_verified(token.continuation_token, token.expires_at)
        await self._reset_repo.update(reset)
        await self._uow.commit()

        await self._event_bus.publish(
            EmailVerificationSucceeded(kind=PASSWORD_RESET_KIND, record_id=reset.id)
        )
        return Success(value=token)
