"""Base domain error carried inside ``Failure`` results.

DomainError is not an Exception. Workflow handlers return it as data and the
presentation layer turns it into a Problem Details response, choosing the
HTTP status from ``code``.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from blindgate.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message, safe to show to the caller.
        details: Optional extra context (never secrets).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
