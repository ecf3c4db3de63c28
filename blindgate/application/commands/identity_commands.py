"""Identity commands (CQRS write operations).

Commands are immutable data containers; handlers execute the logic and
return Result values. Field formats (email, username, code) are validated by
the request schemas before a command is built.
"""

from dataclasses import dataclass
from uuid import UUID


# ═══════════════════════════════════════════════════════════════
# Company path
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class RequestCompanyVerificationCode:
    """Send a verification code to a company email.

    Example:
        >>> cmd = RequestCompanyVerificationCode(email="alice@knowncorp.com")
        >>> result = await handler.handle(cmd)
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class VerifyCompanyEmail:
    """Exchange a company-path code for a continuation token."""

    email: str
    code: str


@dataclass(frozen=True, kw_only=True)
class CompleteCompanyRegistration:
    """Create the account with a generated nickname.

    Attributes:
        continuation_token: Token from VerifyCompanyEmail.
        password: Plain text, hashed by the handler.
        confirm_password: Must equal ``password``.
        user_agent: Client user agent, stored on the session.
        ip_address: Client IP, stored on the session.
    """

    continuation_token: str
    password: str
    confirm_password: str
    user_agent: str | None = None
    ip_address: str | None = None


# ═══════════════════════════════════════════════════════════════
# General path
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class RequestGeneralVerificationCode:
    email: str


@dataclass(frozen=True, kw_only=True)
class VerifyGeneralEmail:
    email: str
    code: str


@dataclass(frozen=True, kw_only=True)
class CompleteGeneralRegistration:
    """Create the account with a chosen username (stored lowercase)."""

    continuation_token: str
    username: str
    password: str
    confirm_password: str
    user_agent: str | None = None
    ip_address: str | None = None


# ═══════════════════════════════════════════════════════════════
# Password reset
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a reset code. The answer never reveals whether the email matched."""

    email: str


@dataclass(frozen=True, kw_only=True)
class VerifyPasswordResetCode:
    email: str
    code: str


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password and revoke every session of the user."""

    continuation_token: str
    new_password: str
    confirm_password: str


# ═══════════════════════════════════════════════════════════════
# Sessions
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate by nickname and password and issue a session.

    Example:
        >>> cmd = LoginUser(nickname="bob123", password="Password123")
    """

    nickname: str
    password: str
    user_agent: str | None = None
    ip_address: str | None = None


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Delete the caller's session (idempotent)."""

    user_id: UUID
    session_id: UUID
