"""Password reset resources.

Endpoints:
    POST  /auth/password-resets                - Request reset code (202)
    POST  /auth/password-resets/verifications  - Exchange code for continuation token
    PATCH /auth/password-resets                - Set the new password
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from blindgate.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from blindgate.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from blindgate.application.commands.handlers.verify_password_reset_code_handler import (
    VerifyPasswordResetCodeHandler,
)
from blindgate.application.commands.identity_commands import (
    ConfirmPasswordReset,
    RequestPasswordReset,
    VerifyPasswordResetCode,
)
from blindgate.core.container import (
    get_confirm_password_reset_handler,
    get_request_password_reset_handler,
    get_verify_password_reset_code_handler,
)
from blindgate.core.result import Failure, Success
from blindgate.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from blindgate.schemas.identity_schemas import (
    ContinuationTokenResponse,
    MessageResponse,
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
    PasswordResetUpdateRequest,
    VerificationCreateRequest,
)

router = APIRouter(prefix="/password-resets", tags=["Password Resets"])


@router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=PasswordResetCreateResponse,
    summary="Request password reset",
    description="Send a reset code if the email belongs to an account. "
    "The response is the same whether or not it does.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> PasswordResetCreateResponse | JSONResponse:
    result = await handler.handle(RequestPasswordReset(email=data.email))

    match result:
        case Success(value=accepted):
            return PasswordResetCreateResponse(
                message=accepted.message, expires_at=accepted.expires_at
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/verifications",
    response_model=ContinuationTokenResponse,
    responses={400: {"model": ProblemDetails}},
    summary="Verify password reset code",
)
async def create_password_reset_verification(
    request: Request,
    data: VerificationCreateRequest,
    handler: VerifyPasswordResetCodeHandler = Depends(
        get_verify_password_reset_code_handler
    ),
) -> ContinuationTokenResponse | JSONResponse:
    result = await handler.handle(
        VerifyPasswordResetCode(email=data.email, code=data.code)
    )

    match result:
        case Success(value=token):
            return ContinuationTokenResponse.from_result(token)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.patch(
    "",
    response_model=MessageResponse,
    responses={
        400: {"model": ProblemDetails},
        403: {"model": ProblemDetails},
        404: {"model": ProblemDetails},
    },
    summary="Confirm password reset",
)
async def update_password_reset(
    request: Request,
    data: PasswordResetUpdateRequest,
    handler: ConfirmPasswordResetHandler = Depends(get_confirm_password_reset_handler),
) -> MessageResponse | JSONResponse:
    """Set the new password and revoke all of the user's sessions.

    PATCH /api/v1/auth/password-resets → 200 OK
    """
    result = await handler.handle(
        ConfirmPasswordReset(
            continuation_token=data.continuation_token,
            new_password=data.new_password,
            confirm_password=data.confirm_password,
        )
    )

    match result:
        case Success():
            return MessageResponse(message="Password has been reset.")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
