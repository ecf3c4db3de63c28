"""Verify general email handler.

Scans only GENERAL records. There is no domain re-check: the request step
already refused company domains.
"""

from blindgate.application.commands.identity_commands import VerifyGeneralEmail
from blindgate.application.dtos import ContinuationTokenResult
from blindgate.application.services.verification_records import (
    EmailVerificationRecords,
)
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.enums import VerificationKind
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.events import (
    EmailVerificationAttempted,
    EmailVerificationFailed,
    EmailVerificationSucceeded,
)
from blindgate.domain.protocols import EventBusProtocol, UnitOfWorkProtocol


class VerifyGeneralEmailHandler:
    """Handler for VerifyGeneralEmail."""

    def __init__(
        self,
        records: EmailVerificationRecords,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._records = records
        self._uow = uow
        self._event_bus = event_bus

    async def handle(
        self, cmd: VerifyGeneralEmail
    ) -> Result[ContinuationTokenResult, DomainError]:
        kind = VerificationKind.GENERAL
        await self._event_bus.publish(EmailVerificationAttempted(kind=kind.value))

        verified = await self._records.verify_code(cmd.email, cmd.code, kind, None)
        if verified is None:
            await self._event_bus.publish(
                EmailVerificationFailed(
                    kind=kind.value,
                    reason=IdentityErrors.INVALID_OR_EXPIRED_CODE.code.value,
                )
            )
            return Failure(error=IdentityErrors.INVALID_OR_EXPIRED_CODE)
        await self._uow.commit()

        await self._event_bus.publish(
            EmailVerificationSucceeded(kind=kind.value, record_id=verified.record.id)
        )
        return Success(value=verified.token)
