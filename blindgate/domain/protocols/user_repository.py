"""UserRepository protocol (port) - the credential store."""

from typing import Protocol
from uuid import UUID

from blindgate.domain.entities.user import User


class UserRepository(Protocol):
    """User persistence port.

    Nicknames are stored lowercase; lookups compare lowercase values.
    Writes are flushed, not committed. The caller's unit of work commits.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        ...

    async def find_by_nickname(self, nickname: str) -> User | None:
        """Find user by login handle (case-insensitive)."""
        ...

    async def exists_by_nickname(self, nickname: str) -> bool:
        """Check whether a nickname is taken (case-insensitive)."""
        ...

    async def find_by_email_hash(self, email_hash: str) -> User | None:
        """Find user by exact email hash."""
        ...

    async def list_active_with_email(self) -> list[User]:
        """List ACTIVE users that carry an email hash.

        Used by the recompute-and-compare scan of the password reset flow;
        a salted hash cannot be looked up without knowing its salt.
        """
        ...

    async def save(self, user: User) -> None:
        """Insert a new user."""
        ...

    async def update(self, user: User) -> None:
        """Persist changed fields of an existing user."""
        ...
