"""Pending registration verification (company or general path)."""

from dataclasses import dataclass
from uuid import UUID

from blindgate.domain.entities.verification_challenge import VerificationChallenge
from blindgate.domain.enums import VerificationKind


@dataclass(slots=True, kw_only=True)
class EmailVerification(VerificationChallenge):
    """Registration challenge.

    Attributes:
        kind: COMPANY or GENERAL.
        company_id: Matched company (COMPANY path only).
    """

    kind: VerificationKind
    company_id: UUID | None = None
