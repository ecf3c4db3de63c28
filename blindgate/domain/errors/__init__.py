"""Identity workflow errors.

Usage:
    from blindgate.domain.errors import IdentityErrors

    return Failure(error=IdentityErrors.INVALID_OR_EXPIRED_CODE)
"""

from blindgate.domain.errors.identity_errors import IdentityErrors

__all__ = ["IdentityErrors"]
