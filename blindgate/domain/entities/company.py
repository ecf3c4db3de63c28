"""Company public info returned by the company-domain resolver."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class CompanyInfo:
    """Public company fields (safe to return to unauthenticated callers)."""

    id: UUID
    name: str
    slug: str
    logo_url: str | None = None
    is_verified: bool = False
