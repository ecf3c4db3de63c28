"""Session authentication dependencies.

Token extraction prefers ``Authorization: Bearer <token>`` over the session
cookie. Resolution (signature, session row, user status) is done by
SessionAuthenticator; these dependencies only adapt it to FastAPI.

Usage:
    # Protected route (requires auth)
    @router.get("/me")
    async def me(identity: IdentityContext = Depends(get_current_identity)):
        ...

    # Optional auth route
    @router.get("/feed")
    async def feed(identity: IdentityContext | None = Depends(get_optional_identity)):
        ...

    # Gates
    @router.post("/reports", dependencies=[Depends(require_roles(UserRole.MODERATOR))])
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blindgate.application.dtos import IdentityContext
from blindgate.application.services.session_authenticator import SessionAuthenticator
from blindgate.core.container import get_app_settings, get_session_authenticator
from blindgate.core.result import Failure, Success
from blindgate.domain.enums import UserRole
from blindgate.domain.errors import IdentityErrors
from blindgate.presentation.routers.api.v1.errors.exception_handlers import (
    DomainErrorException,
)

# auto_error=False: a missing header falls through to the cookie
bearer_scheme = HTTPBearer(auto_error=False)


async def get_session_token(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str | None:
    """Bearer header token, else the session cookie, else None."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(get_app_settings().session_cookie_name) or None


async def get_current_identity(
    token: Annotated[str | None, Depends(get_session_token)],
    authenticator: Annotated[SessionAuthenticator, Depends(get_session_authenticator)],
) -> IdentityContext:
    """Resolve the caller's identity or fail the request.

    Raises:
        DomainErrorException: UNAUTHENTICATED or SESSION_EXPIRED (401),
            ACCOUNT_SUSPENDED (403).
    """
    match await authenticator.authenticate(token):
        case Success(value=identity):
            return identity
        case Failure(error=error):
            raise DomainErrorException(error)


async def get_optional_identity(
    token: Annotated[str | None, Depends(get_session_token)],
    authenticator: Annotated[SessionAuthenticator, Depends(get_session_authenticator)],
) -> IdentityContext | None:
    """Identity if the token resolves, None for any failure."""
    return await authenticator.authenticate_optional(token)


IdentityGate = Callable[..., Awaitable[IdentityContext]]


def require_roles(*roles: UserRole) -> IdentityGate:
    """Build a dependency that allows only the given roles.

    Authentication failures propagate from get_current_identity (401, or 403
    for a suspended account). Other roles get 403.

    Example:
        >>> require_moderator = require_roles(UserRole.MODERATOR, UserRole.ADMIN)
    """
    allowed = frozenset(roles)

    async def check_roles(
        identity: Annotated[IdentityContext, Depends(get_current_identity)],
    ) -> IdentityContext:
        if identity.role not in allowed:
            raise DomainErrorException(IdentityErrors.FORBIDDEN)
        return identity

    return check_roles


require_admin = require_roles(UserRole.ADMIN)


async def require_company_verified(
    identity: Annotated[IdentityContext, Depends(get_current_identity)],
) -> IdentityContext:
    """Allow only users registered through a company domain."""
    if not identity.company_verified:
        raise DomainErrorException(IdentityErrors.COMPANY_VERIFICATION_REQUIRED)
    return identity
