"""Prebuilt DomainError values for the identity workflows.

Errors are immutable, so the same instance is returned from every failure
path that shares a user-facing message. Messages deliberately do not reveal
which of several checks failed (bad signature vs. missing session, unknown
nickname vs. wrong password).
"""

from blindgate.core.enums import ErrorCode
from blindgate.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


class IdentityErrors:
    """Error values returned by registration, reset and session workflows."""

    # Verification
    INVALID_DOMAIN = ValidationError(
        code=ErrorCode.INVALID_DOMAIN,
        message="This email domain is not registered for company verification.",
        field="email",
    )
    USE_COMPANY_VERIFICATION = ValidationError(
        code=ErrorCode.USE_COMPANY_VERIFICATION,
        message="This email belongs to a registered company. Use company verification instead.",
        field="email",
    )
    INVALID_OR_EXPIRED_CODE = ValidationError(
        code=ErrorCode.INVALID_OR_EXPIRED_CODE,
        message="Verification code is invalid or expired.",
        field="code",
    )
    INVALID_OR_EXPIRED_TOKEN = ValidationError(
        code=ErrorCode.INVALID_OR_EXPIRED_TOKEN,
        message="Verification token is invalid or expired.",
        field="continuation_token",
    )
    PASSWORD_MISMATCH = ValidationError(
        code=ErrorCode.PASSWORD_MISMATCH,
        message="Passwords do not match.",
        field="confirm_password",
    )

    # Uniqueness
    EMAIL_ALREADY_REGISTERED = ConflictError(
        code=ErrorCode.EMAIL_ALREADY_REGISTERED,
        message="This email is already registered.",
        resource_type="User",
        conflicting_field="email",
    )
    USERNAME_TAKEN = ConflictError(
        code=ErrorCode.USERNAME_TAKEN,
        message="This username is already taken.",
        resource_type="User",
        conflicting_field="username",
    )

    # Authentication
    UNAUTHENTICATED = AuthenticationError(
        code=ErrorCode.UNAUTHENTICATED,
        message="Authentication required.",
    )
    SESSION_EXPIRED = AuthenticationError(
        code=ErrorCode.SESSION_EXPIRED,
        message="Session has expired. Please log in again.",
    )
    INVALID_CREDENTIALS = AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message="Invalid nickname or password.",
    )

    # Authorization
    ACCOUNT_SUSPENDED = AuthorizationError(
        code=ErrorCode.ACCOUNT_SUSPENDED,
        message="Account has been suspended.",
    )
    FORBIDDEN = AuthorizationError(
        code=ErrorCode.FORBIDDEN,
        message="You do not have permission to perform this action.",
    )
    COMPANY_VERIFICATION_REQUIRED = AuthorizationError(
        code=ErrorCode.FORBIDDEN,
        message="Company verification required.",
        required_permission="company_verified",
    )
    REGISTRATION_DISABLED = AuthorizationError(
        code=ErrorCode.REGISTRATION_DISABLED,
        message="Registration is currently disabled.",
    )

    USER_NOT_FOUND = NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found.",
        resource_type="User",
    )

    @staticmethod
    def weak_password(min_length: int) -> ValidationError:
        """Password shorter than the configured minimum."""
        return ValidationError(
            code=ErrorCode.WEAK_PASSWORD,
            message=f"Password must be at least {min_length} characters.",
            field="password",
            details={"min_length": str(min_length)},
        )
