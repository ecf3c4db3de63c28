"""Request general verification code handler.

Same flow as the company path, except that an email whose domain belongs
to a registered company is rejected with USE_COMPANY_VERIFICATION: a company
email can only ever produce a company-verified account.
"""

from blindgate.application.commands.identity_commands import (
    RequestGeneralVerificationCode,
)
from blindgate.application.dtos import CodeRequestResult
from blindgate.application.services.policy_gate import PolicyGate
from blindgate.application.services.verification_records import (
    EmailVerificationRecords,
)
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.enums import VerificationKind
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.events import (
    VerificationCodeRequestAttempted,
    VerificationCodeRequestFailed,
    VerificationCodeRequestSucceeded,
)
from blindgate.domain.protocols import (
    CompanyRepository,
    EmailProtocol,
    EventBusProtocol,
    UnitOfWorkProtocol,
)
from blindgate.domain.validators import email_domain


class RequestGeneralVerificationCodeHandler:
    """Handler for RequestGeneralVerificationCode."""

    def __init__(
        self,
        company_repo: CompanyRepository,
        records: EmailVerificationRecords,
        email_service: EmailProtocol,
        policy: PolicyGate,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._company_repo = company_repo
        self._records = records
        self._email_service = email_service
        self._policy = policy
        self._uow = uow
        self._event_bus = event_bus

    async def handle(
        self, cmd: RequestGeneralVerificationCode
    ) -> Result[CodeRequestResult, DomainError]:
        domain = email_domain(cmd.email)
        await self._event_bus.publish(
            VerificationCodeRequestAttempted(
                kind=VerificationKind.GENERAL.value, email_domain=domain
            )
        )

        if not await self._policy.registration_enabled():
            return await self._fail(domain, IdentityErrors.REGISTRATION_DISABLED)

        if await self._company_repo.find_by_domain(domain) is not None:
            return await self._fail(domain, IdentityErrors.USE_COMPANY_VERIFICATION)

        issued = await self._records.issue_code(cmd.email, VerificationKind.GENERAL, None)
        await self._uow.commit()

        await self._email_service.send_verification_code(cmd.email, issued.code)

        await self._event_bus.publish(
            VerificationCodeRequestSucceeded(
                kind=VerificationKind.GENERAL.value,
                verification_id=issued.record.id,
                reused=issued.reused,
            )
        )
        return Success(value=CodeRequestResult(expires_at=issued.record.code_expires_at))

    async def _fail(self, domain: str, error: DomainError) -> Failure[DomainError]:
        await self._event_bus.publish(
            VerificationCodeRequestFailed(
                kind=VerificationKind.GENERAL.value,
                email_domain=domain,
                reason=error.code.value,
            )
        )
        return Failure(error=error)
