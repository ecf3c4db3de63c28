"""Password reset challenge for an existing user."""

from dataclasses import dataclass
from datetime import UTC, datetime

from blindgate.domain.entities.verification_challenge import VerificationChallenge


@dataclass(slots=True, kw_only=True)
class PasswordReset(VerificationChallenge):
    """Reset challenge keyed by the target user's email hash and salt.

    Business Rules:
        - Cannot be reused once ``used_at`` is set

    Attributes:
        used_at: When the reset completed.
    """

    used_at: datetime | None = None

    def reissue_code(self, code: str, expires_at: datetime) -> None:
        super(PasswordReset, self).reissue_code(code, expires_at)
        self.used_at = None

    def is_code_valid(self, code: str) -> bool:
        return self.used_at is None and super(PasswordReset, self).is_code_valid(code)

    def has_usable_token(self) -> bool:
        return self.used_at is None and super(PasswordReset, self).has_usable_token()

    def mark_used(self) -> None:
        """Consume the reset (token cleared, ``used_at`` stamped)."""
        self.consume_token()
        self.used_at = datetime.now(UTC)
