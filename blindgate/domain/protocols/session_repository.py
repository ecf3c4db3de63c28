"""SessionRepository protocol (port) - the session store."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from blindgate.domain.entities.session import Session


class SessionRepository(Protocol):
    """Session persistence port."""

    async def save(self, session: Session) -> None:
        """Insert a new session (token already signed)."""
        ...

    async def find_by_id(self, session_id: UUID) -> Session | None:
        """Find session by ID."""
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[Session]:
        """List a user's sessions, newest first."""
        ...

    async def update_last_used(self, session_id: UUID, used_at: datetime) -> None:
        """Refresh ``last_used_at`` (``expires_at`` is never moved)."""
        ...

    async def delete(self, session_id: UUID) -> bool:
        """Delete one session.

        Returns:
            True if a row was deleted, False if it was already gone.
        """
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every session of a user.

        Returns:
            Number of sessions deleted.
        """
        ...
