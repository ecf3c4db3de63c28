"""Machine-readable error codes for the identity subsystem.

Codes are rendered verbatim in the ``code`` field of Problem Details
responses. HTTP status mapping lives in the presentation layer
(``presentation/routers/api/v1/errors/error_response_builder.py``).

Categories:
- Validation errors (INVALID_*, *_MISMATCH, WEAK_PASSWORD)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_REGISTERED, *_TAKEN)
- Authentication errors (UNAUTHENTICATED, SESSION_EXPIRED, INVALID_CREDENTIALS)
- Authorization errors (FORBIDDEN, ACCOUNT_SUSPENDED, REGISTRATION_DISABLED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    PASSWORD_MISMATCH = "password_mismatch"
    WEAK_PASSWORD = "weak_password"
    INVALID_DOMAIN = "invalid_domain"
    USE_COMPANY_VERIFICATION = "use_company_verification"
    INVALID_OR_EXPIRED_CODE = "invalid_or_expired_code"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_REGISTERED = "email_already_registered"
    USERNAME_TAKEN = "username_taken"

    # Authentication errors
    UNAUTHENTICATED = "unauthenticated"
    SESSION_EXPIRED = "session_expired"
    INVALID_CREDENTIALS = "invalid_credentials"

    # Authorization errors
    FORBIDDEN = "forbidden"
    ACCOUNT_SUSPENDED = "account_suspended"
    REGISTRATION_DISABLED = "registration_disabled"
