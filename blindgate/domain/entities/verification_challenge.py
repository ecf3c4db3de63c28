"""Shared state machine for emailed-code challenges.

Both registration verification and password reset follow the same steps:

    CodeSent --(correct code before expiry)--> CodeVerified
    CodeVerified --(token used before expiry)--> Completed

The code and the continuation token are checked lazily against their
stored expiry; nothing sweeps expired rows.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class VerificationChallenge:
    """Base for salted-hash challenges.

    Attributes:
        id: Record identifier.
        email_hash: Salted sha256 of the normalized email.
        email_salt: Salt used for ``email_hash`` (not secret).
        code: 6-digit code, regenerated on every request.
        code_expires_at: Code is accepted only strictly before this instant.
        verified: Set once the correct code is supplied.
        continuation_token: One-time token issued after verification.
        token_expires_at: Expiry for ``continuation_token``.
    """

    id: UUID
    email_hash: str
    email_salt: str
    code: str
    code_expires_at: datetime
    verified: bool = False
    continuation_token: str | None = None
    token_expires_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def reissue_code(self, code: str, expires_at: datetime) -> None:
        """Replace the code and restart the flow (old code stops verifying)."""
        self.code = code
        self.code_expires_at = expires_at
        self.verified = False
        self.continuation_token = None
        self.token_expires_at = None
        self.updated_at = datetime.now(UTC)

    def is_code_valid(self, code: str) -> bool:
        """Check a supplied code against this record."""
        return (
            not self.verified
            and self.code == code
            and datetime.now(UTC) < self.code_expires_at
        )

    def mark_verified(self, token: str, expires_at: datetime) -> None:
        """Accept the code and issue the continuation token."""
        self.verified = True
        self.continuation_token = token
        self.token_expires_at = expires_at
        self.updated_at = datetime.now(UTC)

    def has_usable_token(self) -> bool:
        """Check the continuation token can still complete the flow."""
        return (
            self.verified
            and self.continuation_token is not None
            and self.token_expires_at is not None
            and datetime.now(UTC) < self.token_expires_at
        )

    def consume_token(self) -> None:
        """Clear the continuation token after a successful completion."""
        self.continuation_token = None
        self.token_expires_at = None
        self.updated_at = datetime.now(UTC)
