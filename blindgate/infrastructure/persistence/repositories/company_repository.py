"""CompanyRepository - resolves email domains against the company allowlist."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blindgate.domain.entities.company import CompanyInfo
from blindgate.infrastructure.persistence.models.company import (
    CompanyDomainModel,
    CompanyModel,
)


def _to_info(model: CompanyModel) -> CompanyInfo:
    return CompanyInfo(
        id=model.id,
        name=model.name,
        slug=model.slug,
        logo_url=model.logo_url,
        is_verified=model.is_verified,
    )


class CompanyRepository:
    """SQLAlchemy implementation of CompanyRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_domain(self, domain: str) -> CompanyInfo | None:
        stmt = (
            select(CompanyModel)
            .join(CompanyDomainModel, CompanyDomainModel.company_id == CompanyModel.id)
            .where(CompanyDomainModel.domain == domain.lower())
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_info(model) if model is not None else None

    async def find_by_id(self, company_id: UUID) -> CompanyInfo | None:
        model = await self.session.get(CompanyModel, company_id)
        return _to_info(model) if model is not None else None
