"""Domain entities.

Usage:
    from blindgate.domain.entities import User, Session, EmailVerification
"""

from blindgate.domain.entities.company import CompanyInfo
from blindgate.domain.entities.email_verification import EmailVerification
from blindgate.domain.entities.password_reset import PasswordReset
from blindgate.domain.entities.session import Session
from blindgate.domain.entities.user import User
from blindgate.domain.entities.verification_challenge import VerificationChallenge

__all__ = [
    "CompanyInfo",
    "EmailVerification",
    "PasswordReset",
    "Session",
    "User",
    "VerificationChallenge",
]
