"""Session resources.

Endpoints:
    POST   /auth/sessions          - Login (201, sets cookie)
    DELETE /auth/sessions/current  - Logout (204, clears cookie)
    GET    /auth/me                - Current user profile
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from blindgate.application.commands.handlers.login_user_handler import LoginUserHandler
from blindgate.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from blindgate.application.commands.identity_commands import LoginUser, LogoutUser
from blindgate.application.dtos import IdentityContext
from blindgate.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from blindgate.application.queries.user_queries import GetCurrentUser
from blindgate.core.container import (
    get_current_user_handler,
    get_login_user_handler,
    get_logout_user_handler,
)
from blindgate.core.result import Failure, Success
from blindgate.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
)
from blindgate.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from blindgate.presentation.routers.api.v1.session_cookie import (
    clear_session_cookie,
    set_session_cookie,
)
from blindgate.schemas.identity_schemas import (
    CurrentUserResponse,
    SessionCreateRequest,
    SessionResponse,
)

router = APIRouter(tags=["Sessions"])


@router.post(
    "/sessions",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionResponse,
    responses={
        401: {"model": ProblemDetails},
        403: {"model": ProblemDetails},
    },
    summary="Login",
    description="Authenticate by nickname and password. The token is returned "
    "in the body and as an HttpOnly cookie.",
)
async def create_session(
    request: Request,
    response: Response,
    data: SessionCreateRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> SessionResponse | JSONResponse:
    result = await handler.handle(
        LoginUser(
            nickname=data.nickname,
            password=data.password,
            user_agent=request.headers.get("user-agent"),
            ip_address=request.client.host if request.client else None,
        )
    )

    match result:
        case Success(value=session):
            set_session_cookie(response, session)
            return SessionResponse.from_session(session)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.delete(
    "/sessions/current",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ProblemDetails}},
    summary="Logout",
)
async def delete_current_session(
    request: Request,
    identity: Annotated[IdentityContext, Depends(get_current_identity)],
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> Response:
    """Delete the session behind the presented token and clear the cookie."""
    result = await handler.handle(
        LogoutUser(user_id=identity.id, session_id=identity.session_id)
    )

    match result:
        case Success():
            response = Response(status_code=status.HTTP_204_NO_CONTENT)
            clear_session_cookie(response)
            return response
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    responses={
        401: {"model": ProblemDetails},
        403: {"model": ProblemDetails},
        404: {"model": ProblemDetails},
    },
    summary="Current user",
)
async def get_me(
    request: Request,
    identity: Annotated[IdentityContext, Depends(get_current_identity)],
    handler: GetCurrentUserHandler = Depends(get_current_user_handler),
) -> CurrentUserResponse | JSONResponse:
    result = await handler.handle(GetCurrentUser(user_id=identity.id))

    match result:
        case Success(value=profile):
            return CurrentUserResponse.from_profile(profile)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
