"""Identity workflow events.

Pattern: events per workflow (ATTEMPTED → SUCCEEDED/FAILED)
- *Attempted: published before business logic
- *Succeeded: published after the step committed
- *Failed: published when the step returned a Failure

``kind`` identifies the flow: COMPANY, GENERAL or PASSWORD_RESET.
Emails appear only as an 8-character hash prefix.

Handlers:
- LoggingEventHandler: all events
"""

from dataclasses import dataclass
from uuid import UUID

from blindgate.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Verification code request
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class VerificationCodeRequestAttempted(DomainEvent):
    """Verification code requested (company or general path)."""

    kind: str
    email_domain: str


@dataclass(frozen=True, kw_only=True)
class VerificationCodeRequestSucceeded(DomainEvent):
    """Code issued and handed to the notifier.

    Attributes:
        verification_id: Upserted record.
        reused: True when an existing record for the same email was reset.
    """

    kind: str
    verification_id: UUID
    company_id: UUID | None = None
    reused: bool = False


@dataclass(frozen=True, kw_only=True)
class VerificationCodeRequestFailed(DomainEvent):
    """Code request rejected (registration disabled, wrong path)."""

    kind: str
    email_domain: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Email code verification (registration and password reset)
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class EmailVerificationAttempted(DomainEvent):
    kind: str


@dataclass(frozen=True, kw_only=True)
class EmailVerificationSucceeded(DomainEvent):
    """Code accepted and continuation token issued."""

    kind: str
    record_id: UUID


@dataclass(frozen=True, kw_only=True)
class EmailVerificationFailed(DomainEvent):
    kind: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Registration completion
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserRegistrationAttempted(DomainEvent):
    kind: str


@dataclass(frozen=True, kw_only=True)
class UserRegistrationSucceeded(DomainEvent):
    """User and first session created in one transaction.

    Attributes:
        joined_community_id: Company community the user was auto-joined to.
    """

    kind: str
    user_id: UUID
    session_id: UUID
    company_id: UUID | None = None
    joined_community_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UserRegistrationFailed(DomainEvent):
    kind: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Login / logout
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserLoginAttempted(DomainEvent):
    nickname: str


@dataclass(frozen=True, kw_only=True)
class UserLoginSucceeded(DomainEvent):
    user_id: UUID
    session_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserLoginFailed(DomainEvent):
    """Login rejected.

    Attributes:
        user_id: Set when the nickname resolved (wrong password, suspended).
    """

    nickname: str
    reason: str
    user_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UserLogoutAttempted(DomainEvent):
    user_id: UUID
    session_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserLogoutSucceeded(DomainEvent):
    """Session deleted (``session_found`` False when it was already gone)."""

    user_id: UUID
    session_id: UUID
    session_found: bool


# ═══════════════════════════════════════════════════════════════
# Password reset
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestAttempted(DomainEvent):
    email_domain: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestSucceeded(DomainEvent):
    """Reset request answered.

    Attributes:
        matched: Whether an active account matched (never exposed to the caller).
    """

    matched: bool
    user_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class PasswordResetConfirmAttempted(DomainEvent):
    pass


@dataclass(frozen=True, kw_only=True)
class PasswordResetConfirmSucceeded(DomainEvent):
    """Password replaced and every session of the user deleted."""

    user_id: UUID
    sessions_revoked: int


@dataclass(frozen=True, kw_only=True)
class PasswordResetConfirmFailed(DomainEvent):
    reason: str
    user_id: UUID | None = None
