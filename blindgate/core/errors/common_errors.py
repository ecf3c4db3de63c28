"""Error categories shared by every workflow.

- ValidationError: bad input (domain, code, token, password)
- NotFoundError: referenced resource missing
- ConflictError: uniqueness violations (email, username)
- AuthenticationError: no identity, expired session, bad credentials
- AuthorizationError: identity present but not allowed
"""

from dataclasses import dataclass

from blindgate.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Request field that failed validation, if any.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found."""

    resource_type: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that collided (email, username).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (missing identity, expired session, bad credentials)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure.

    Attributes:
        required_permission: Role or predicate the caller failed, if known.
    """

    required_permission: str | None = None
