"""Domain protocols (ports).

Infrastructure adapters implement these structurally; nothing inherits from
them.

Usage:
    from blindgate.domain.protocols import UserRepository, EmailProtocol
"""

from blindgate.domain.protocols.community_repository import CommunityRepository
from blindgate.domain.protocols.company_repository import CompanyRepository
from blindgate.domain.protocols.email_hasher_protocol import EmailHasherProtocol
from blindgate.domain.protocols.email_protocol import EmailProtocol
from blindgate.domain.protocols.email_verification_repository import (
    EmailVerificationRepository,
)
from blindgate.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from blindgate.domain.protocols.logger_protocol import LoggerProtocol
from blindgate.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from blindgate.domain.protocols.password_reset_repository import (
    PasswordResetRepository,
)
from blindgate.domain.protocols.session_repository import SessionRepository
from blindgate.domain.protocols.session_token_protocol import (
    SessionClaims,
    SessionTokenProtocol,
)
from blindgate.domain.protocols.settings_repository import SettingsRepository
from blindgate.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol
from blindgate.domain.protocols.user_repository import UserRepository

__all__ = [
    "CommunityRepository",
    "CompanyRepository",
    "EmailHasherProtocol",
    "EmailProtocol",
    "EmailVerificationRepository",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "PasswordResetRepository",
    "SessionClaims",
    "SessionRepository",
    "SessionTokenProtocol",
    "SettingsRepository",
    "UnitOfWorkProtocol",
    "UserRepository",
]
