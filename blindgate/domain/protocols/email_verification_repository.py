"""EmailVerificationRepository protocol (port) - pending registration records."""

from typing import Protocol
from uuid import UUID

from blindgate.domain.entities.email_verification import EmailVerification
from blindgate.domain.enums import VerificationKind


class EmailVerificationRepository(Protocol):
    """Verification record persistence port.

    Records are keyed by a salted hash, so there is no direct lookup by email.
    Callers fetch candidate records and recompute the hash with each record's
    own salt.
    """

    async def list_in_scope(
        self,
        kind: VerificationKind,
        company_id: UUID | None,
    ) -> list[EmailVerification]:
        """List every record of a path (and company, for the company path).

        Used on code request to find an existing record for the same email.
        """
        ...

    async def list_pending_with_code(
        self,
        kind: VerificationKind,
        company_id: UUID | None,
        code: str,
    ) -> list[EmailVerification]:
        """List unverified records with an unexpired matching code.

        Ordered by creation time so the first hash match is deterministic.
        """
        ...

    async def find_by_continuation_token(self, token: str) -> EmailVerification | None:
        """Find the record holding a continuation token."""
        ...

    async def save(self, verification: EmailVerification) -> None:
        """Insert a new record."""
        ...

    async def update(self, verification: EmailVerification) -> None:
        """Persist changed fields of an existing record."""
        ...
