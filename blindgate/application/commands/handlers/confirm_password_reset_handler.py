"""Confirm password reset handler.

Flow:
1. Emit PasswordResetConfirmAttempted
2. Resolve the token (verified, unexpired, unused)
3. Check the new password pair against policy
4. Resolve the user by the record's email hash; it must be ACTIVE
5. In one transaction: update the password hash, mark the reset used,
   delete every session of the user
6. Emit PasswordResetConfirmSucceeded
"""

from uuid import UUID

from blindgate.application.commands.identity_commands import ConfirmPasswordReset
from blindgate.application.services.account_registrar import check_new_password
from blindgate.application.services.policy_gate import PolicyGate
from blindgate.core.errors import DomainError
from blindgate.core.result import Failure, Result, Success
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.events import (
    PasswordResetConfirmAttempted,
    PasswordResetConfirmFailed,
    PasswordResetConfirmSucceeded,
)
from blindgate.domain.protocols import (
    EventBusProtocol,
    PasswordHashingProtocol,
    PasswordResetRepository,
    SessionRepository,
    UnitOfWorkProtocol,
    UserRepository,
)


class ConfirmPasswordResetHandler:
    """Handler for ConfirmPasswordReset."""

    def __init__(
        self,
        reset_repo: PasswordResetRepository,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        password_service: PasswordHashingProtocol,
        policy: PolicyGate,
        uow: UnitOfWorkProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._reset_repo = reset_repo
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._password_service = password_service
        self._policy = policy
        self._uow = uow
        self._event_bus = event_bus

    async def handle(self, cmd: ConfirmPasswordReset) -> Result[None, DomainError]:
        """Set the new password.

        Returns:
            Success(None).
            Failure(INVALID_OR_EXPIRED_TOKEN | PASSWORD_MISMATCH |
            WEAK_PASSWORD | USER_NOT_FOUND | ACCOUNT_SUSPENDED).

        Side Effects:
            Deletes all of the user's sessions; every device must log in
            again with the new password.
        """
        await self._event_bus.publish(PasswordResetConfirmAttempted())

        reset = await self._reset_repo.find_by_continuation_token(cmd.continuation_token)
        if reset is None or not reset.has_usable_token():
            return await self._fail(IdentityErrors.INVALID_OR_EXPIRED_TOKEN)

        password_error = await check_new_password(
            self._policy, cmd.new_password, cmd.confirm_password
        )
        if password_error is not None:
            return await self._fail(password_error)

        user = await self._user_repo.find_by_email_hash(reset.email_hash)
        if user is None:
            return await self._fail(IdentityErrors.USER_NOT_FOUND)
        if not user.is_active():
            return await self._fail(IdentityErrors.ACCOUNT_SUSPENDED, user.id)

        user.change_password(self._password_service.hash_password(cmd.new_password))
        await self._user_repo.update(user)

        reset.mark_used()
        await self._reset_repo.update(reset)

        revoked = await self._session_repo.delete_all_for_user(user.id)
        await self._uow.commit()

        await self._event_bus.publish(
            PasswordResetConfirmSucceeded(user_id=user.id, sessions_revoked=revoked)
        )
        return Success(value=None)

    async def _fail(
        self, error: DomainError, user_id: UUID | None = None
    ) -> Failure[DomainError]:
        await self._event_bus.publish(
            PasswordResetConfirmFailed(reason=error.code.value, user_id=user_id)
        )
        return Failure(error=error)
