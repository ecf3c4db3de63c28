"""CompanyRepository protocol (port) - the company-domain resolver."""

from typing import Protocol
from uuid import UUID

from blindgate.domain.entities.company import CompanyInfo


class CompanyRepository(Protocol):
    """Resolves email domains to registered companies."""

    async def find_by_domain(self, domain: str) -> CompanyInfo | None:
        """Resolve a lowercase email domain to its company.

        Returns:
            CompanyInfo if the domain is on the allowlist, None otherwise.
        """
        ...

    async def find_by_id(self, company_id: UUID) -> CompanyInfo | None:
        ...
