"""Registration resources (company path and general path).

Endpoints:
    POST /auth/company/verification-codes   - Request company code
    POST /auth/company/verifications        - Verify company code
    POST /auth/company/registrations        - Complete company registration (201)
    POST /auth/general/verification-codes   - Request general code
    POST /auth/general/verifications        - Verify general code
    POST /auth/general/registrations        - Complete general registration (201)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from blindgate.application.commands.handlers.complete_company_registration_handler import (
    CompleteCompanyRegistrationHandler,
)
from blindgate.application.commands.handlers.complete_general_registration_handler import (
    CompleteGeneralRegistrationHandler,
)
from blindgate.application.commands.handlers.request_company_verification_code_handler import (
    RequestCompanyVerificationCodeHandler,
)
from blindgate.application.commands.handlers.request_general_verification_code_handler import (
    RequestGeneralVerificationCodeHandler,
)
from blindgate.application.commands.handlers.verify_company_email_handler import (
    VerifyCompanyEmailHandler,
)
from blindgate.application.commands.handlers.verify_general_email_handler import (
    VerifyGeneralEmailHandler,
)
from blindgate.application.commands.identity_commands import (
    CompleteCompanyRegistration,
    CompleteGeneralRegistration,
    RequestCompanyVerificationCode,
    RequestGeneralVerificationCode,
    VerifyCompanyEmail,
    VerifyGeneralEmail,
)
from blindgate.core.container import (
    get_complete_company_registration_handler,
    get_complete_general_registration_handler,
    get_request_company_code_handler,
    get_request_general_code_handler,
    get_verify_company_email_handler,
    get_verify_general_email_handler,
)
from blindgate.core.result import Failure, Success
from blindgate.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from blindgate.presentation.routers.api.v1.session_cookie import set_session_cookie
from blindgate.schemas.identity_schemas import (
    CompanyRegistrationCreateRequest,
    ContinuationTokenResponse,
    GeneralRegistrationCreateRequest,
    SessionResponse,
    VerificationCodeCreateRequest,
    VerificationCodeCreateResponse,
    VerificationCreateRequest,
)

company_router = APIRouter(prefix="/company", tags=["Company Registration"])
general_router = APIRouter(prefix="/general", tags=["General Registration"])

_ERRORS = {
    400: {"model": ProblemDetails},
    403: {"model": ProblemDetails},
    409: {"model": ProblemDetails},
}


def _client(request: Request) -> tuple[str | None, str | None]:
    """(user_agent, ip_address) of the caller."""
    ip_address = request.client.host if request.client else None
    return request.headers.get("user-agent"), ip_address


# =============================================================================
# Company path
# =============================================================================


@company_router.post(
    "/verification-codes",
    response_model=VerificationCodeCreateResponse,
    responses=_ERRORS,
    summary="Request company verification code",
)
async def create_company_verification_code(
    request: Request,
    data: VerificationCodeCreateRequest,
    handler: RequestCompanyVerificationCodeHandler = Depends(
        get_request_company_code_handler
    ),
) -> VerificationCodeCreateResponse | JSONResponse:
    """Send a code to an email on a registered company domain.

    Returns the company's public info and the code expiry.
    """
    result = await handler.handle(RequestCompanyVerificationCode(email=data.email))

    match result:
        case Success(value=issued):
            return VerificationCodeCreateResponse.from_result(issued)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@company_router.post(
    "/verifications",
    response_model=ContinuationTokenResponse,
    responses=_ERRORS,
    summary="Verify company email",
)
async def create_company_verification(
    request: Request,
    data: VerificationCreateRequest,
    handler: VerifyCompanyEmailHandler = Depends(get_verify_company_email_handler),
) -> ContinuationTokenResponse | JSONResponse:
    result = await handler.handle(VerifyCompanyEmail(email=data.email, code=data.code))

    match result:
        case Success(value=token):
            return ContinuationTokenResponse.from_result(token)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@company_router.post(
    "/registrations",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionResponse,
    responses=_ERRORS,
    summary="Complete company registration",
)
async def create_company_registration(
    request: Request,
    response: Response,
    data: CompanyRegistrationCreateRequest,
    handler: CompleteCompanyRegistrationHandler = Depends(
        get_complete_company_registration_handler
    ),
) -> SessionResponse | JSONResponse:
    """Create the account with a generated nickname and log it in.

    POST /api/v1/auth/company/registrations → 201 Created, sets the session cookie.
    """
    user_agent, ip_address = _client(request)
    result = await handler.handle(
        CompleteCompanyRegistration(
            continuation_token=data.continuation_token,
            password=data.password,
            confirm_password=data.confirm_password,
            user_agent=user_agent,
            ip_address=ip_address,
        )
    )

    match result:
        case Success(value=session):
            set_session_cookie(response, session)
            return SessionResponse.from_session(session)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


# =============================================================================
# General path
# =============================================================================


@general_router.post(
    "/verification-codes",
    response_model=VerificationCodeCreateResponse,
    responses=_ERRORS,
    summary="Request general verification code",
)
async def create_general_verification_code(
    request: Request,
    data: VerificationCodeCreateRequest,
    handler: RequestGeneralVerificationCodeHandler = Depends(
        get_request_general_code_handler
    ),
) -> VerificationCodeCreateResponse | JSONResponse:
    """Send a code to an email outside every registered company domain."""
    result = await handler.handle(RequestGeneralVerificationCode(email=data.email))

    match result:
        case Success(value=issued):
            return VerificationCodeCreateResponse.from_result(issued)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@general_router.post(
    "/verifications",
    response_model=ContinuationTokenResponse,
    responses=_ERRORS,
    summary="Verify general email",
)
async def create_general_verification(
    request: Request,
    data: VerificationCreateRequest,
    handler: VerifyGeneralEmailHandler = Depends(get_verify_general_email_handler),
) -> ContinuationTokenResponse | JSONResponse:
    result = await handler.handle(VerifyGeneralEmail(email=data.email, code=data.code))

    match result:
        case Success(value=token):
            return ContinuationTokenResponse.from_result(token)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@general_router.post(
    "/registrations",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionResponse,
    responses=_ERRORS,
    summary="Complete general registration",
)
async def create_general_registration(
    request: Request,
    response: Response,
    data: GeneralRegistrationCreateRequest,
    handler: CompleteGeneralRegistrationHandler = Depends(
        get_complete_general_registration_handler
    ),
) -> SessionResponse | JSONResponse:
    user_agent, ip_address = _client(request)
    result = await handler.handle(
        CompleteGeneralRegistration(
            continuation_token=data.continuation_token,
            username=data.username,
            password=data.password,
            confirm_password=data.confirm_password,
            user_agent=user_agent,
            ip_address=ip_address,
        )
    )

    match result:
        case Success(value=session):
            set_session_cookie(response, session)
            return SessionResponse.from_session(session)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
