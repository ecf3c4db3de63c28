"""SQLAlchemy repository adapters.

Every repository flushes and never commits; see SqlAlchemyUnitOfWork.
"""

from blindgate.infrastructure.persistence.repositories.community_repository import (
    CommunityRepository,
)
from blindgate.infrastructure.persistence.repositories.company_repository import (
    CompanyRepository,
)
from blindgate.infrastructure.persistence.repositories.email_verification_repository import (
    EmailVerificationRepository,
)
from blindgate.infrastructure.persistence.repositories.password_reset_repository import (
    PasswordResetRepository,
)
from blindgate.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)
from blindgate.infrastructure.persistence.repositories.settings_repository import (
    SettingsRepository,
)
from blindgate.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "CommunityRepository",
    "CompanyRepository",
    "EmailVerificationRepository",
    "PasswordResetRepository",
    "SessionRepository",
    "SettingsRepository",
    "UserRepository",
]
