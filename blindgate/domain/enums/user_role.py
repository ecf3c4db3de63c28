"""User roles used by the role gates.

Usage:
    from blindgate.domain.enums import UserRole

    if identity.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str so values serialize directly into token claims,
        database columns and JSON responses.
    """

    USER = "USER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"
