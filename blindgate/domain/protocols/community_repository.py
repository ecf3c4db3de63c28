"""CommunityRepository protocol (port) - used for company auto-join."""

from typing import Protocol
from uuid import UUID


class CommunityRepository(Protocol):
    """Minimal community boundary used by registration."""

    async def find_company_community_id(self, company_id: UUID) -> UUID | None:
        """Return the COMPANY-type community of a company, if one exists."""
        ...

    async def add_member(self, community_id: UUID, user_id: UUID) -> None:
        """Add a member and increment the community's member counter."""
        ...
