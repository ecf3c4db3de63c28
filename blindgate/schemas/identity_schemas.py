"""Identity request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints (prefix /api/v1/auth):
    POST   /company/verification-codes      - Request company code
    POST   /company/verifications           - Verify company code
    POST   /company/registrations           - Complete company registration
    POST   /general/verification-codes      - Request general code
    POST   /general/verifications           - Verify general code
    POST   /general/registrations           - Complete general registration
    POST   /password-resets                 - Request reset code
    POST   /password-resets/verifications   - Verify reset code
    PATCH  /password-resets                 - Complete reset
    POST   /sessions                        - Login
    DELETE /sessions/current                - Logout
    GET    /me                              - Current user
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from blindgate.application.dtos import (
    AuthenticatedSession,
    CodeRequestResult,
    ContinuationTokenResult,
    CurrentUserProfile,
    PublicUser,
)
from blindgate.domain.entities.company import CompanyInfo
from blindgate.domain.enums import UserRole, UserStatus
from blindgate.domain.types import (
    ContinuationToken,
    Email,
    Nickname,
    Password,
    Username,
    VerificationCode,
)

# =============================================================================
# Verification
# =============================================================================


class VerificationCodeCreateRequest(BaseModel):
    """Request a verification code (both paths)."""

    email: Email

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "alice@knowncorp.com"}}
    )


class CompanyResponse(BaseModel):
    """Public company info."""

    id: UUID
    name: str
    slug: str
    logo_url: str | None = None

    @classmethod
    def from_company(cls, company: CompanyInfo) -> "CompanyResponse":
        return cls(
            id=company.id,
            name=company.name,
            slug=company.slug,
            logo_url=company.logo_url,
        )


class VerificationCodeCreateResponse(BaseModel):
    """Code sent. The code itself is never part of the response."""

    message: str = Field(default="Verification code sent.")
    expires_at: datetime
    company: CompanyResponse | None = None

    @classmethod
    def from_result(cls, result: CodeRequestResult) -> "VerificationCodeCreateResponse":
        return cls(
            expires_at=result.expires_at,
            company=(
                CompanyResponse.from_company(result.company)
                if result.company is not None
                else None
            ),
        )


class VerificationCreateRequest(BaseModel):
    """Submit the emailed code (registration and password reset)."""

    email: Email
    code: VerificationCode

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "alice@knowncorp.com", "code": "123456"}}
    )


class ContinuationTokenResponse(BaseModel):
    """One-time token for the final step."""

    continuation_token: str
    expires_at: datetime

    @classmethod
    def from_result(cls, result: ContinuationTokenResult) -> "ContinuationTokenResponse":
        return cls(
            continuation_token=result.continuation_token,
            expires_at=result.expires_at,
        )


# =============================================================================
# Registration and login
# =============================================================================


class CompanyRegistrationCreateRequest(BaseModel):
    """Complete company registration (nickname is generated)."""

    continuation_token: ContinuationToken
    password: Password
    confirm_password: Password


class GeneralRegistrationCreateRequest(BaseModel):
    """Complete general registration with a chosen username."""

    continuation_token: ContinuationToken
    username: Username
    password: Password
    confirm_password: Password

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "continuation_token": "9f2c...",
                "username": "bob123",
                "password": "Password123",
                "confirm_password": "Password123",
            }
        }
    )


class SessionCreateRequest(BaseModel):
    """Login with nickname (or chosen username) and password."""

    nickname: Nickname
    password: str = Field(..., min_length=1, max_length=100)


class PublicUserResponse(BaseModel):
    id: UUID
    nickname: str
    company_id: UUID | None
    company_verified: bool
    role: UserRole

    @classmethod
    def from_user(cls, user: PublicUser) -> "PublicUserResponse":
        return cls(
            id=user.id,
            nickname=user.nickname,
            company_id=user.company_id,
            company_verified=user.company_verified,
            role=user.role,
        )


class SessionResponse(BaseModel):
    """Registration or login result (201). The token is also set as a cookie."""

    user: PublicUserResponse
    token: str
    token_type: str = Field(default="bearer")
    expires_at: datetime

    @classmethod
    def from_session(cls, session: AuthenticatedSession) -> "SessionResponse":
        return cls(
            user=PublicUserResponse.from_user(session.user),
            token=session.token,
            expires_at=session.expires_at,
        )


class CurrentUserResponse(BaseModel):
    """GET /me."""

    id: UUID
    nickname: str
    company_verified: bool
    role: UserRole
    status: UserStatus
    last_active_at: datetime | None
    created_at: datetime
    company: CompanyResponse | None = None

    @classmethod
    def from_profile(cls, profile: CurrentUserProfile) -> "CurrentUserResponse":
        return cls(
            id=profile.id,
            nickname=profile.nickname,
            company_verified=profile.company_verified,
            role=profile.role,
            status=profile.status,
            last_active_at=profile.last_active_at,
            created_at=profile.created_at,
            company=(
                CompanyResponse.from_company(profile.company)
                if profile.company is not None
                else None
            ),
        )


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetCreateRequest(BaseModel):
    """Request a reset code."""

    email: Email


class PasswordResetCreateResponse(BaseModel):
    """Identical whether or not the email is registered."""

    message: str
    expires_at: datetime


class PasswordResetUpdateRequest(BaseModel):
    """Set the new password with the continuation token."""

    continuation_token: ContinuationToken
    new_password: Password
    confirm_password: Password


class MessageResponse(BaseModel):
    message: str
