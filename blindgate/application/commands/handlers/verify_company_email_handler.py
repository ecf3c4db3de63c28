"""Verify company email handler.

Flow:
1. Emit EmailVerificationAttempted
2. Re-resolve the email domain (the mapping may have been removed)
3. Scan the company's pending records holding this code; the first record
   whose hash recomputes from the email wins
4. Mark it verified, issue a continuation token, commit
5. Emit EmailVerificationSucceeded
"""

from blindgate.application.commands.identity_commands import VerifyCompanyEmail
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
from blindgate.domain.protocols import (
    CompanyRepository,
    EventBusProtocol,
    UnitOfWorkProtocol,
)
from blindgate.domain.validators import email_domain


class VerifyCompanyEmailHandler:
    """Handler for VerifyCompanyEmail."""

    def __init__(
        self,
        company_repo: CompanyRepository,
        records: EmailVerificationRecords,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._company_repo = company_repo
        self._records = records
        self._uow = uow
        self._event_bus = event_bus

    async def handle(
        self, cmd: VerifyCompanyEmail
    ) -> Result[ContinuationTokenResult, DomainError]:
        """Exchange a code for a continuation token.

        Returns:
            Success(ContinuationTokenResult).
            Failure(INVALID_DOMAIN) if the domain no longer resolves.
            Failure(INVALID_OR_EXPIRED_CODE) if no pending record matches.
        """
        kind = VerificationKind.COMPANY
        await self._event_bus.publish(EmailVerificationAttempted(kind=kind.value))

        company = await self._company_repo.find_by_domain(email_domain(cmd.email))
        if company is None:
            return await self._fail(IdentityErrors.INVALID_DOMAIN)

        verified = await self._records.verify_code(cmd.email, cmd.code, kind, company.id)
        if verified is None:
            return await self._fail(IdentityErrors.INVALID_OR_EXPIRED_CODE)
        await self._uow.commit()

        await self._event_bus.publish(
            EmailVerificationSucceeded(kind=kind.value, record_id=verified.record.id)
        )
        return Success(value=verified.token)

    async def _fail(self, error: DomainError) -> Failure[DomainError]:
        await self._event_bus.publish(
            EmailVerificationFailed(
                kind=VerificationKind.COMPANY.value, reason=error.code.value
            )
        )
        return Failure(error=error)
