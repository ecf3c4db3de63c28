"""Stub notifier.

Implements EmailProtocol by logging. Codes are included in the log only
when ``reveal_codes`` is on (development), so a developer can complete the
flows locally; recipients are always logged as a masked address.
"""

from blindgate.domain.protocols.logger_protocol import LoggerProtocol


def _mask(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:1]}***@{domain}"


class StubEmailService:
    """Logging notifier for development and testing.

    Args:
        logger: Structured logger.
        reveal_codes: Log the code itself (development only).
    """

    def __init__(self, logger: LoggerProtocol, *, reveal_codes: bool = False) -> None:
        self._logger = logger
        self._reveal_codes = reveal_codes

    async def send_verification_code(
        self,
        to_email: str,
        code: str,
        company_name: str | None = None,
    ) -> None:
        self._logger.info(
            "stub_verification_code_sent",
            to=_mask(to_email),
            company_name=company_name,
            code=code if self._reveal_codes else "******",
        )

    async def send_password_reset_code(self, to_email: str, code: str) -> None:
        self._logger.info(
            "stub_password_reset_code_sent",
            to=_mask(to_email),
            code=code if self._reveal_codes else "******",
        )
