"""Database models for the persistence layer.

Models Organization:
    - user.py: Credential store
    - session.py: Issued sessions
    - email_verification.py: Pending registration verifications
    - password_reset.py: Password reset challenges
    - company.py: Companies and their allowlisted email domains
    - community.py: Communities and memberships (company auto-join)
    - app_setting.py: Key-value policy settings

Domain entities (dataclasses) live in blindgate/domain/entities/ and are
mapped to these models by the repositories.
"""

from blindgate.infrastructure.persistence.base import BaseModel
from blindgate.infrastructure.persistence.models.app_setting import AppSettingModel
from blindgate.infrastructure.persistence.models.community import (
    CommunityMemberModel,
    CommunityModel,
)
from blindgate.infrastructure.persistence.models.company import (
    CompanyDomainModel,
    CompanyModel,
)
from blindgate.infrastructure.persistence.models.email_verification import (
    EmailVerificationModel,
)
from blindgate.infrastructure.persistence.models.password_reset import (
    PasswordResetModel,
)
from blindgate.infrastructure.persistence.models.session import SessionModel
from blindgate.infrastructure.persistence.models.user import UserModel

__all__ = [
    "AppSettingModel",
    "BaseModel",
    "CommunityMemberModel",
    "CommunityModel",
    "CompanyDomainModel",
    "CompanyModel",
    "EmailVerificationModel",
    "PasswordResetModel",
    "SessionModel",
    "UserModel",
]
