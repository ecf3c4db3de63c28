"""Session database model.

Rows are deleted at logout and, for every session of the user, at password
reset completion. ``ON DELETE CASCADE`` removes sessions with their user.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blindgate.infrastructure.persistence.base import BaseModel, UTCDateTime


class SessionModel(BaseModel):
    """Session model.

    Indexes:
        - idx_sessions_user_id: (user_id) for bulk deletion
        - idx_sessions_expires_at: (expires_at) for cleanup queries
    """

    __tablename__ = "sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    token: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Signed bearer token embedding user_id and session id",
    )
    user_agent: Mapped[str | None] = mapped_column(String(500), nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    last_used_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (
        Index("idx_sessions_user_id", "user_id"),
        Index("idx_sessions_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        return f"<SessionModel(id={self.id}, user_id={self.user_id}, expires_at={self.expires_at})>"
