"""User database model (credential store).

Security:
    - password_hash: bcrypt, never plaintext
    - email_hash/email_salt: salted sha256; the plaintext email is never stored
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from blindgate.infrastructure.persistence.base import BaseMutableModel, UTCDateTime


class UserModel(BaseMutableModel):
    """User model.

    Indexes:
        - nickname (unique): login lookup and uniqueness
        - email_hash (unique): one email, one account
        - idx_users_status_email: (status, email_hash) for the reset scan

    Foreign Keys:
        - company_id: References companies(id) ON DELETE SET NULL
    """

    __tablename__ = "users"

    nickname: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        index=True,
        nullable=False,
        comment="Login handle, stored lowercase",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt password hash",
    )
    email_hash: Mapped[str | None] = mapped_column(
        String(64),
        unique=True,
        nullable=True,
        comment="sha256(lower(email) + email_salt), hex",
    )
    email_salt: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        comment="Salt for email_hash (not secret)",
    )
    company_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("companies.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    company_verified: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Registered through a matched company domain",
    )
    role: Mapped[str] = mapped_column(
        String(20),
        default="USER",
        nullable=False,
        comment="USER, MODERATOR or ADMIN",
    )
    status: Mapped[str] = mapped_column(
        String(20),
        default="ACTIVE",
        nullable=False,
        comment="ACTIVE, SUSPENDED or DELETED",
    )
    last_active_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
    )

    __table_args__ = (Index("idx_users_status_email", "status", "email_hash"),)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, nickname={self.nickname}, status={self.status})>"
