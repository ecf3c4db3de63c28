"""Community models used by the company auto-join step."""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from blindgate.infrastructure.persistence.base import BaseModel, BaseMutableModel


class CommunityModel(BaseMutableModel):
    """Community (TOPIC, COMPANY, INTEREST or PUBLIC_SERVANT)."""

    __tablename__ = "communities"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    company_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    member_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<CommunityModel(id={self.id}, slug={self.slug}, type={self.type})>"


class CommunityMemberModel(BaseModel):
    __tablename__ = "community_members"

    community_id: Mapped[UUID] = mapped_column(
        ForeignKey("communities.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("community_id", "user_id", name="uq_community_members"),
    )
