"""Domain events.

Usage:
    from blindgate.domain.events import DomainEvent, UserLoginSucceeded
"""

from blindgate.domain.events.base_event import DomainEvent
from blindgate.domain.events.identity_events import (
    EmailVerificationAttempted,
    EmailVerificationFailed,
    EmailVerificationSucceeded,
    PasswordResetConfirmAttempted,
    PasswordResetConfirmFailed,
    PasswordResetConfirmSucceeded,
    PasswordResetRequestAttempted,
    PasswordResetRequestSucceeded,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserLogoutAttempted,
    UserLogoutSucceeded,
    UserRegistrationAttempted,
    UserRegistrationFailed,
    UserRegistrationSucceeded,
    VerificationCodeRequestAttempted,
    VerificationCodeRequestFailed,
    VerificationCodeRequestSucceeded,
)

__all__ = [
    "DomainEvent",
    "EmailVerificationAttempted",
    "EmailVerificationFailed",
    "EmailVerificationSucceeded",
    "PasswordResetConfirmAttempted",
    "PasswordResetConfirmFailed",
    "PasswordResetConfirmSucceeded",
    "PasswordResetRequestAttempted",
    "PasswordResetRequestSucceeded",
    "UserLoginAttempted",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserLogoutAttempted",
    "UserLogoutSucceeded",
    "UserRegistrationAttempted",
    "UserRegistrationFailed",
    "UserRegistrationSucceeded",
    "VerificationCodeRequestAttempted",
    "VerificationCodeRequestFailed",
    "VerificationCodeRequestSucceeded",
]
