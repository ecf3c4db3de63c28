"""Result DTOs returned by identity handlers."""

from blindgate.application.dtos.identity_dtos import (
    AuthenticatedSession,
    CodeRequestResult,
    ContinuationTokenResult,
    CurrentUserProfile,
    IdentityContext,
    PasswordResetRequestResult,
    PublicUser,
)

__all__ = [
    "AuthenticatedSession",
    "CodeRequestResult",
    "ContinuationTokenResult",
    "CurrentUserProfile",
    "IdentityContext",
    "PasswordResetRequestResult",
    "PublicUser",
]
