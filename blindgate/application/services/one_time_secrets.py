"""Random values handed to users during verification flows."""

import secrets


def new_verification_code() -> str:
    """Return a 6-digit numeric code (100000-999999)."""
    return str(100_000 + secrets.randbelow(900_000))


def new_continuation_token() -> str:
    """Return a 64-character hex one-time token."""
    return secrets.token_hex(32)
