"""EmailProtocol - the Notifier port.

Delivery is out of scope; the stub adapter logs. Failures propagate to the
workflow caller and are not retried.
"""

from typing import Protocol


class EmailProtocol(Protocol):
    """Notifier for verification and reset codes."""

    async def send_verification_code(
        self,
        to_email: str,
        code: str,
        company_name: str | None = None,
    ) -> None:
        """Send a registration verification code.

        Args:
            to_email: Recipient address (plaintext, never persisted).
            code: 6-digit code.
            company_name: Matched company for company-path requests.
        """
        ...

    async def send_password_reset_code(self, to_email: str, code: str) -> None:
        """Send a password reset code."""
        ...
