"""Base domain event class.

Domain events are immutable records of things that happened, named in past
tense (UserLoginSucceeded, PasswordResetConfirmFailed). They never carry a
plaintext email, code, password or token.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class UserLoginSucceeded(DomainEvent):
    ...     user_id: UUID
    >>> event = UserLoginSucceeded(user_id=uuid7())
    >>> event.event_id, event.occurred_at  # auto-generated
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance (UUIDv7).
        occurred_at: When the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
