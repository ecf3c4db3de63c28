"""User queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """Profile of the authenticated user.

    Example:
        >>> query = GetCurrentUser(user_id=identity.id)
        >>> result = await handler.handle(query)
    """

    user_id: UUID
