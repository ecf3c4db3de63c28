"""Session domain entity.

A session row is the source of truth for token validity: deleting or
expiring the row revokes its bearer token even while the token's own
signature is still unexpired.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class Session:
    """Authenticated session.

    Business Rules:
        - ``expires_at`` is absolute; activity never extends it
        - ``last_used_at`` is refreshed on every authenticated request

    Attributes:
        id: Session identifier embedded in the bearer token.
        user_id: Owning user.
        token: Signed bearer token.
        user_agent: Client user agent at creation.
        ip_address: Client IP at creation.
        expires_at: Absolute expiry.
        last_used_at: Last authenticated request.
    """

    id: UUID
    user_id: UUID
    token: str
    expires_at: datetime
    user_agent: str | None = None
    ip_address: str | None = None
    last_used_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self) -> bool:
        return datetime.now(UTC) >= self.expires_at

    def touch(self) -> datetime:
        """Record use of the session and return the timestamp."""
        self.last_used_at = datetime.now(UTC)
        return self.last_used_at
