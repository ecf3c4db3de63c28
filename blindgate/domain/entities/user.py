"""User domain entity.

Pure business logic, no framework dependencies.

Anonymity:
    The plaintext email is never stored. ``email_hash``/``email_salt`` allow
    exact-match comparison against a freshly supplied email and nothing more.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from blindgate.domain.enums import UserRole, UserStatus


@dataclass(slots=True, kw_only=True)
class User:
    """User domain entity.

    Business Rules:
        - Only ACTIVE users may log in, authenticate, or reset a password
        - One email hash maps to at most one user
        - ``company_verified`` is True only for company-path registrations

    Attributes:
        id: Unique user identifier (UUIDv7).
        nickname: Unique login handle (generated pseudonym or chosen username).
        password_hash: Bcrypt hash, never plaintext.
        email_hash: Salted sha256 of the registration email (None for seeded accounts).
        email_salt: Salt that produced ``email_hash``.
        company_id: Affiliated company (company path only).
        company_verified: Registered through a matched company domain.
        role: USER, MODERATOR or ADMIN.
        status: ACTIVE, SUSPENDED or DELETED.
        last_active_at: Last login.
    """

    id: UUID
    nickname: str
    password_hash: str
    email_hash: str | None = None
    email_salt: str | None = None
    company_id: UUID | None = None
    company_verified: bool = False
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    last_active_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_active(self) -> bool:
        """Check if the account may authenticate."""
        return self.status == UserStatus.ACTIVE

    def record_login(self) -> None:
        """Stamp ``last_active_at`` after a successful login."""
        now = datetime.now(UTC)
        self.last_active_at = now
        self.updated_at = now

    def change_password(self, password_hash: str) -> None:
        """Replace the password hash.

        Args:
            password_hash: New bcrypt hash.
        """
        self.password_hash = password_hash
        self.updated_at = datetime.now(UTC)
