"""Complete general registration handler.

Like the company path, but the caller chooses the username (already
validated and lowercased by the request schema), no community is joined
and the account is not company verified. Email and username collisions are
both reported as conflicts.
"""

from blindgate.application.commands.identity_commands import (
    CompleteGeneralRegistration,
)
from blindgate.application.dtos import AuthenticatedSession, PublicUser
from blindgate.application.services.account_registrar import (
    AccountRegistrar,
    check_new_password,
)
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
    EmailVerificationRepository,
    EventBusProtocol,
    UnitOfWorkProtocol,
    UserRepository,
)


class CompleteGeneralRegistrationHandler:
    """Handler for CompleteGeneralRegistration."""

    def __init__(
        self,
        records: EmailVerificationRecords,
        verification_repo: EmailVerificationRepository,
        user_repo: UserRepository,
        registrar: AccountRegistrar,
        policy: PolicyGate,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._records = records
        self._verification_repo = verification_repo
        self._user_repo = user_repo
        self._registrar = registrar
        self._policy = policy
        self._uow = uow
        self._event_bus = event_bus

    async def handle(
        self, cmd: CompleteGeneralRegistration
    ) -> Result[AuthenticatedSession, DomainError]:
        kind = VerificationKind.GENERAL
        await self._event_bus.publish(UserRegistrationAttempted(kind=kind.value))

        record = await self._records.resolve_token(cmd.continuation_token)
        if record is None or record.kind != kind:
            return await self._fail(IdentityErrors.INVALID_OR_EXPIRED_TOKEN)

        password_error = await check_new_password(
            self._policy, cmd.password, cmd.confirm_password
        )
        if password_error is not None:
            return await self._fail(password_error)

        if await self._user_repo.find_by_email_hash(record.email_hash) is not None:
            return await self._fail(IdentityErrors.EMAIL_ALREADY_REGISTERED)

        username = cmd.username.lower()
        if await self._user_repo.exists_by_nickname(username):
            return await self._fail(IdentityErrors.USERNAME_TAKEN)

        account = await self._registrar.register(
            nickname=username,
            password=cmd.password,
            email_hash=record.email_hash,
            email_salt=record.email_salt,
            company_id=None,
            company_verified=False,
            user_agent=cmd.user_agent,
            ip_address=cmd.ip_address,
        )

        record.consume_token()
        await self._verification_repo.update(record)
        await self._uow.commit()

        session = account.issued.session
        await self._event_bus.publish(
            UserRegistrationSucceeded(
                kind=kind.value, user_id=account.user.id, session_id=session.id
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
                kind=VerificationKind.GENERAL.value, reason=error.code.value
            )
        )
        return Failure(error=error)
