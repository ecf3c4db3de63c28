"""Registration path a pending email verification belongs to."""

from enum import Enum


class VerificationKind(str, Enum):
    """Registration path.

    COMPANY: email domain matched a registered company domain.
    GENERAL: any other email domain.
    """

    COMPANY = "COMPANY"
    GENERAL = "GENERAL"
