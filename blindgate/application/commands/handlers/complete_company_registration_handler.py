"""Complete company registration handler.

Flow:
1. Emit UserRegistrationAttempted
2. Resolve the continuation token (verified, unexpired, COMPANY record)
3. Check passwords match and meet the minimum length policy
4. Reject an email hash that already belongs to a user
5. Allocate a pseudonymous nickname
6. In one transaction: create user (company_verified=True) and session,
   clear the token, auto-join the company's COMPANY community
7. Emit UserRegistrationSucceeded
8. Return Success(AuthenticatedSession)
"""

from blindgate.application.commands.identity_commands import (
    CompleteCompanyRegistration,
)
from blindgate.application.dtos import AuthenticatedSession, PublicUser
from blindgate.application.services.account_registrar import (
    AccountRegistrar,
    check_new_password,
)
from blindgate.application.services.nickname_generator import allocate_nickname
from blindgate.application.services.policy_gate import PolicyGate
from blindgate.application.services.verification_records import (
    EmailVerificationRecords,
)
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.enums import VerificationKind
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.events import (
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
)
from blindgate.domain.protocols import (
    CommunityRepository,
    EmailVerificationRepository,
    EventBusProtocol,
    UnitOfWorkProtocol,
    UserRepository,
)


class CompleteCompanyRegistrationHandler:
    """Handler for CompleteCompanyRegistration."""

    def __init__(
        self,
        records: EmailVerificationRecords,
        verification_repo: EmailVerificationRepository,
        user_repo: UserRepository,
        community_repo: CommunityRepository,
        registrar: AccountRegistrar,
        policy: PolicyGate,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
        *,
        nickname_max_attempts: int = 10,
    ) -> None:
        self._records = records
        self._verification_repo = verification_repo
        self._user_repo = user_repo
        self._community_repo = community_repo
        self._registrar = registrar
        self._policy = policy
        self._uow = uow
        self._event_bus = event_bus
        self._nickname_max_attempts = nickname_max_attempts

    async def handle(
        self, cmd: CompleteCompanyRegistration
    ) -> Result[AuthenticatedSession, DomainError]:
        """Create the company-verified account.

        Returns:
            Success(AuthenticatedSession) with the generated nickname.
            Failure(INVALID_OR_EXPIRED_TOKEN | PASSWORD_MISMATCH |
            WEAK_PASSWORD | EMAIL_ALREADY_REGISTERED).
        """
        kind = VerificationKind.COMPANY
        await self._event_bus.publish(UserRegistrationAttempted(kind=kind.value))

        record = await self._records.resolve_token(cmd.continuation_token)
        if record is None or record.kind != kind or record.company_id is None:
            return await self._fail(IdentityErrors.INVALID_OR_EXPIRED_TOKEN)

        password_error = await check_new_password(
            self._policy, cmd.password, cmd.confirm_password
        )
        if password_error is not None:
            return await self._fail(password_error)

        if await self._user_repo.find_by_email_hash(record.email_hash) is not None:
            return await self._fail(IdentityErrors.EMAIL_ALREADY_REGISTERED)

        nickname = await allocate_nickname(
            self._user_repo.exists_by_nickname,
            max_attempts=self._nickname_max_attempts,
        )

        account = await self._registrar.register(
            nickname=nickname,
            password=cmd.password,
            email_hash=record.email_hash,
            email_salt=record.email_salt,
            company_id=record.company_id,
            company_verified=True,
            user_agent=cmd.user_agent,
            ip_address=cmd.ip_address,
        )

        record.consume_token()
        await self._verification_repo.update(record)

        community_id = await self._community_repo.find_company_community_id(
            record.company_id
        )
        if community_id is not None:
            await self._community_repo.add_member(community_id, account.user.id)

        await self._uow.commit()

        session = account.issued.session
        await self._event_bus.publish(
            UserRegistrationSucceeded(
                kind=kind.value,
                user_id=account.user.id,
                session_id=session.id,
                company_id=record.company_id,
                joined_community_id=community_id,
            )
        )
        return Success(
            value=AuthenticatedSession(
                user=PublicUser.from_user(account.user),
                token=session.token,
                expires_at=session.expires_at,
                cookie_max_age=account.issued.cookie_max_age,
            )
        )

    async def _fail(self, error: DomainError) -> Failure[DomainError]:
        await self._event_bus.publish(
            UserRegistrationFailed(
                kind=VerificationKind.COMPANY.value, reason=error.code.value
            )
        )
        return Failure(error=error)
