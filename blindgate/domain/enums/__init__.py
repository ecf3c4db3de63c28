"""Domain enums package.

Usage:
    from blindgate.domain.enums import UserRole, UserStatus, VerificationKind
"""

from blindgate.domain.enums.community_type import CommunityType
from blindgate.domain.enums.user_role import UserRole
from blindgate.domain.enums.user_status import UserStatus
from blindgate.domain.enums.verification_kind import VerificationKind

__all__ = ["CommunityType", "UserRole", "UserStatus", "VerificationKind"]
