"""CommunityRepository - company community lookup and membership."""

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.domain.enums import CommunityType
from blindgate.infrastructure.persistence.models.community import (
    CommunityMemberModel,
    CommunityModel,
)


class CommunityRepository:
    """SQLAlchemy implementation of CommunityRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_company_community_id(self, company_id: UUID) -> UUID | None:
        stmt = (
            select(CommunityModel.id)
            .where(
                CommunityModel.company_id == company_id,
                CommunityModel.type == CommunityType.COMPANY.value,
            )
            .order_by(CommunityModel.created_at.asc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_member(self, community_id: UUID, user_id: UUID) -> None:
        """Insert membership and increment member_count in the same flush."""
        self.session.add(CommunityMemberModel(community_id=community_id, user_id=user_id))
        await self.session.execute(
            update(CommunityModel)
            .where(CommunityModel.id == community_id)
            .values(member_count=CommunityModel.member_count + 1)
        )
        await self.session.flush()
