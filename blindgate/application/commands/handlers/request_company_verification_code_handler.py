"""Request company verification code handler.

Flow:
1. Emit VerificationCodeRequestAttempted
2. Check the registration-enabled policy
3. Resolve the email domain to a company
4. Upsert the record for this email (reuse by recompute-and-compare)
5. Commit, then send the code
6. Emit VerificationCodeRequestSucceeded
7. Return Success(CodeRequestResult) with the company's public info

The code is never returned to the caller or logged.
"""

from blindgate.application.commands.identity_commands import (
    RequestCompanyVerificationCode,
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


class RequestCompanyVerificationCodeHandler:
    """Handler for RequestCompanyVerificationCode."""

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
        self, cmd: RequestCompanyVerificationCode
    ) -> Result[CodeRequestResult, DomainError]:
        """Handle a company code request.

        Returns:
            Success(CodeRequestResult) with ``expires_at`` and the company.
            Failure(REGISTRATION_DISABLED) when the policy is off.
            Failure(INVALID_DOMAIN) when the domain is not a company domain.

        Raises:
            Exception: Notifier failures propagate after the record committed.
        """
        domain = email_domain(cmd.email)
        await self._event_bus.publish(
            VerificationCodeRequestAttempted(
                kind=VerificationKind.COMPANY.value, email_domain=domain
            )
        )

        if not await self._policy.registration_enabled():
            return await self._fail(domain, IdentityErrors.REGISTRATION_DISABLED)

        company = await self._company_repo.find_by_domain(domain)
        if company is None:
            return await self._fail(domain, IdentityErrors.INVALID_DOMAIN)

        issued = await self._records.issue_code(
            cmd.email, VerificationKind.COMPANY, company.id
        )
        await self._uow.commit()

        await self._email_service.send_verification_code(
            cmd.email, issued.code, company_name=company.name
        )

        await self._event_bus.publish(
            VerificationCodeRequestSucceeded(
                kind=VerificationKind.COMPANY.value,
                verification_id=issued.record.id,
                company_id=company.id,
                reused=issued.reused,
            )
        )
        return Success(
            value=CodeRequestResult(
                expires_at=issued.record.code_expires_at, company=company
            )
        )

    async def _fail(
        self, domain: str, error: DomainError
    ) -> Failure[DomainError]:
        await self._event_bus.publish(
            VerificationCodeRequestFailed(
                kind=VerificationKind.COMPANY.value,
                email_domain=domain,
                reason=error.code.value,
            )
        )
        return Failure(error=error)
