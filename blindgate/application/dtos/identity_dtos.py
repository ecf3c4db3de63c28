"""Identity DTOs (Data Transfer Objects).

Carry data from handlers back to the presentation layer. None of them hold
an email, a verification code or a password hash.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from blindgate.domain.entities.company import CompanyInfo
from blindgate.domain.entities.user import User
from blindgate.domain.enums import UserRole, UserStatus


@dataclass(frozen=True, kw_only=True)
class CodeRequestResult:
    """Answer to a verification code request.

    Attributes:
        expires_at: When the emailed code stops verifying.
        company: Matched company (company path only).
    """

    expires_at: datetime
    company: CompanyInfo | None = None


@dataclass(frozen=True, kw_only=True)
class ContinuationTokenResult:
    """One-time token proving the code step succeeded."""

    continuation_token: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class PublicUser:
    """User fields safe to return to the account owner."""

    id: UUID
    nickname: str
    company_id: UUID | None
    company_verified: bool
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(
            id=user.id,
            nickname=user.nickname,
            company_id=user.company_id,
            company_verified=user.company_verified,
            role=user.role,
        )


@dataclass(frozen=True, kw_only=True)
class AuthenticatedSession:
    """Result of login or registration completion.

    Attributes:
        user: Public user fields.
        token: Signed session bearer token.
        expires_at: Absolute session expiry.
        cookie_max_age: Cookie lifetime in seconds, from the same
            session-days policy value that produced ``expires_at``.
    """

    user: PublicUser
    token: str
    expires_at: datetime
    cookie_max_age: int


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestResult:
    """Identical answer whether or not the email matched an account."""

    message: str
    expires_at: datetime


@dataclass(frozen=True, kw_only=True)
class IdentityContext:
    """Read-only identity attached to an authenticated request.

    Consumed by every feature that needs the caller's identity.
    """

    id: UUID
    nickname: str
    company_id: UUID | None
    company_verified: bool
    role: UserRole
    session_id: UUID


@dataclass(frozen=True, kw_only=True)
class CurrentUserProfile:
    """Profile returned by GetCurrentUser."""

    id: UUID
    nickname: str
    company_verified: bool
    role: UserRole
    status: UserStatus
    last_active_at: datetime | None
    created_at: datetime
    company: CompanyInfo | None = None
