"""LoggerProtocol definition for structured logging.

Implementations MUST emit structured (key-value) logs and callers MUST NOT
log secrets: no plaintext emails, verification codes, continuation tokens,
session tokens or passwords. Log ids and short hash prefixes instead.

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("session_created", user_id=str(user_id), session_id=str(session_id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters (ConsoleAdapter)."""

    def debug(self, message: str, /, **context: Any) -> None:
        ...

    def info(self, message: str, /, **context: Any) -> None:
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name (snake_case, no f-strings).
            error: Optional exception; adapters add error_type/error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
