"""PasswordResetRepository protocol (port)."""

from typing import Protocol

from blindgate.domain.entities.password_reset import PasswordReset


class PasswordResetRepository(Protocol):
    """Password reset record persistence port.

    A reset record copies the target user's hash and salt, so upsert by
    ``email_hash`` is exact.
    """

    async def find_by_email_hash(self, email_hash: str) -> PasswordReset | None:
        ...

    async def list_pending_with_code(self, code: str) -> list[PasswordReset]:
        """List unverified, unused records with an unexpired matching code."""
        ...

    async def find_by_continuation_token(self, token: str) -> PasswordReset | None:
        ...

    async def save(self, reset: PasswordReset) -> None:
        ...

    async def update(self, reset: PasswordReset) -> None:
        ...
