"""Account status. Only ACTIVE accounts may log in or authenticate."""

from enum import Enum


class UserStatus(str, Enum):
    """Account status (DELETED is a soft marker, rows are never removed)."""

    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"
