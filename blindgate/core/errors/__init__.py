"""Core errors package.

Usage:
    from blindgate.core.errors import DomainError, ValidationError, ConflictError
"""

from blindgate.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from blindgate.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
]
