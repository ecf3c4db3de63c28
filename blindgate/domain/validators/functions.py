"""Centralized validation functions.

Validators are pure functions that raise ValueError on failure; they back the
Annotated types in ``blindgate.domain.types``.
"""

import re

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
_CODE_PATTERN = re.compile(r"^\d{6}$")


def validate_email(v: str) -> str:
    """Validate email format and normalize to lowercase.

    Example:
        >>> validate_email("Alice@KnownCorp.com")
        'alice@knowncorp.com'
    """
    v = v.strip()
    if not _EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v.lower()


def email_domain(email: str) -> str:
    """Return the lowercase domain part of an email address.

    Example:
        >>> email_domain("alice@KnownCorp.com")
        'knowncorp.com'
    """
    return email.rsplit("@", 1)[-1].lower()


def validate_username(v: str) -> str:
    """Validate a chosen username (4-20 chars, letters, digits, underscore).

    Returns:
        Lowercased username.
    """
    if not 4 <= len(v) <= 20:
        raise ValueError("Username must be between 4 and 20 characters")
    if not _USERNAME_PATTERN.match(v):
        raise ValueError("Username can only contain letters, numbers, and underscores")
    return v.lower()


def validate_verification_code(v: str) -> str:
    """Validate a 6-digit numeric code."""
    if not _CODE_PATTERN.match(v):
        raise ValueError("Verification code must be 6 digits")
    return v
