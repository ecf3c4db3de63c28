"""Password reset database model.

Structurally a verification record keyed by the target user's email hash,
plus ``used_at`` marking one-time consumption.
"""

from datetime import datetime

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from blindgate.infrastructure.persistence.base import BaseMutableModel, UTCDateTime


class PasswordResetModel(BaseMutableModel):
    """Password reset challenge.

    Indexes:
        - email_hash (unique): upsert key (the user's own hash)
        - continuation_token (unique): completion lookup
        - idx_password_resets_pending: (code, verified) for the code scan
    """

    __tablename__ = "password_resets"

    email_hash: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    email_salt: Mapped[str] = mapped_column(String(64), nullable=False)
    code: Mapped[str] = mapped_column(String(6), nullable=False)
    code_expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    continuation_token: Mapped[str | None] = mapped_column(
        String(128),
        unique=True,
        nullable=True,
    )
    token_expires_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)
    used_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
        comment="Set once; a used reset can never complete again",
    )

    __table_args__ = (Index("idx_password_resets_pending", "code", "verified"),)

    def __repr__(self) -> str:
        return f"<PasswordResetModel(id={self.id}, verified={self.verified}, used_at={self.used_at})>"
