"""API v1 routers.

All identity resources live under ``/api/v1/auth``.
"""

from fastapi import APIRouter

from blindgate.presentation.routers.api.v1.password_resets import (
    router as password_resets_router,
)
from blindgate.presentation.routers.api.v1.registrations import (
    company_router,
    general_router,
)
from blindgate.presentation.routers.api.v1.sessions import router as sessions_router

v1_router = APIRouter(prefix="/api/v1/auth")

v1_router.include_router(company_router)
v1_router.include_router(general_router)
v1_router.include_router(password_resets_router)
v1_router.include_router(sessions_router)

__all__ = ["v1_router"]
