"""Company directory models.

Owned by company management; this service only reads them to resolve email
domains (the allowlist that constitutes "company verification").
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from blindgate.infrastructure.persistence.base import BaseModel, BaseMutableModel


class CompanyModel(BaseMutableModel):
    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    logo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<CompanyModel(id={self.id}, slug={self.slug})>"


class CompanyDomainModel(BaseModel):
    """Allowlisted email domain of a company (stored lowercase)."""

    __tablename__ = "company_domains"

    company_id: Mapped[UUID] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    domain: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<CompanyDomainModel(domain={self.domain}, company_id={self.company_id})>"
