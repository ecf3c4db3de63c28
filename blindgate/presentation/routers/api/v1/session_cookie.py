"""Session cookie helpers (HttpOnly, SameSite=lax, path /)."""

from fastapi import Response

from blindgate.application.dtos import AuthenticatedSession
from blindgate.core.container import get_app_settings


def set_session_cookie(response: Response, session: AuthenticatedSession) -> None:
    """Set the cookie with max-age from the session-days policy."""
    settings = get_app_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=session.cookie_max_age,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_app_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
    )
