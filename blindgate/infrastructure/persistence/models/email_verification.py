"""Email verification database model (pending registrations).

Security:
    - No plaintext email: email_hash + email_salt only
    - code: 6 digits, regenerated on every request, valid until code_expires_at
    - continuation_token: 32-byte hex, issued after the code is verified,
      cleared when registration completes
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from blindgate.infrastructure.persistence.base import BaseMutableModel, UTCDateTime


class EmailVerificationModel(BaseMutableModel):
    """Pending verification for the company or general registration path.

    Indexes:
        - email_hash (unique): at most one record per hash
        - continuation_token (unique): completion lookup
        - idx_email_verifications_pending: (kind, company_id, code, verified)
          for the code scan
    """

    __tablename__ = "email_verifications"

    email_hash: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    email_salt: Mapped[str] = mapped_column(String(64), nullable=False)
    kind: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="COMPANY or GENERAL",
    )
    company_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=True,
    )
    code: Mapped[str] = mapped_column(String(6), nullable=False)
    code_expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    continuation_token: Mapped[str | None] = mapped_column(
        String(128),
        unique=True,
        nullable=True,
    )
    token_expires_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    __table_args__ = (
        Index(
            "idx_email_verifications_pending",
            "kind",
            "company_id",
            "code",
            "verified",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<EmailVerificationModel(id={self.id}, kind={self.kind}, "
            f"verified={self.verified})>"
        )
