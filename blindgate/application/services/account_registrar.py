"""Final step shared by both registration paths.

Checks the password pair against policy, then creates the user and its first
session. Uniqueness checks (email hash, username) stay with the handlers
because each path reports them differently.
"""

from dataclasses import dataclass
from uuid import UUID

from uuid_extensions import uuid7

from blindgate.application.services.policy_gate import PolicyGate
from blindgate.application.services.session_issuer import IssuedSession, SessionIssuer
from blindgate.core.errors import DomainError
from blindgate.domain.entities.user import User
from blindgate.domain.errors import IdentityErrors
from blindgate.domain.protocols import PasswordHashingProtocol, UserRepository


@dataclass(frozen=True, kw_only=True)
class RegisteredAccount:
    user: User
    issued: IssuedSession


async def check_new_password(
    policy: PolicyGate, password: str, confirm_password: str
) -> DomainError | None:
    """Return the first failing password rule, or None.

    Used by registration and by password reset completion.
    """
    if password != confirm_password:
        return IdentityErrors.PASSWORD_MISMATCH
    min_length = await policy.min_password_length()
    if len(password) < min_length:
        return IdentityErrors.weak_password(min_length)
    return None


class AccountRegistrar:
    """Create a user plus its first session (flushed, not committed)."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        session_issuer: SessionIssuer,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._session_issuer = session_issuer

    async def register(
        self,
        *,
        nickname: str,
        password: str,
        email_hash: str,
        email_salt: str,
        company_id: UUID | None,
        company_verified: bool,
        user_agent: str | None,
        ip_address: str | None,
    ) -> RegisteredAccount:
        user = User(
            id=uuid7(),
            nickname=nickname,
            password_hash=self._password_service.hash_password(password),
            email_hash=email_hash,
            email_salt=email_salt,
            company_id=company_id,
            company_verified=company_verified,
        )
        user.record_login()
        await self._user_repo.save(user)

        issued = await self._session_issuer.issue(
            user.id, user_agent=user_agent, ip_address=ip_address
        )
        return RegisteredAccount(user=user, issued=issued)
