"""Annotated types with centralized validation.

Usage:
    from blindgate.domain.types import Email, Password, Username

    class LoginRequest(BaseModel):
        nickname: Nickname
        password: str
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from blindgate.domain.validators import (
    validate_email,
    validate_username,
    validate_verification_code,
)

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address (normalized to lowercase)",
        examples=["alice@knowncorp.com"],
    ),
    AfterValidator(validate_email),
]

Password = Annotated[
    str,
    Field(
        min_length=1,
        max_length=100,
        description="Password",
        examples=["Password123"],
    ),
]
"""Password (bcrypt input).

The minimum length is a stored policy (``security.minPasswordLength``) and is
enforced by the workflow, not here.
"""

Username = Annotated[
    str,
    Field(description="Chosen username (4-20 chars)", examples=["bob123"]),
    AfterValidator(validate_username),
]

Nickname = Annotated[
    str,
    Field(min_length=1, max_length=50, description="Login handle", examples=["brave_fox_0042"]),
]

VerificationCode = Annotated[
    str,
    Field(description="6-digit verification code", examples=["123456"]),
    AfterValidator(validate_verification_code),
]

ContinuationToken = Annotated[
    str,
    Field(min_length=1, max_length=128, description="One-time continuation token"),
]
