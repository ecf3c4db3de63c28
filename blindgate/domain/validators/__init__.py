"""Validation functions reused by the Annotated request types.

Usage:
    from blindgate.domain.validators import validate_email, email_domain
"""

from blindgate.domain.validators.functions import (
    email_domain,
    validate_email,
    validate_username,
    validate_verification_code,
)

__all__ = [
    "email_domain",
    "validate_email",
    "validate_username",
    "validate_verification_code",
]
