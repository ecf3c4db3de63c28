"""System router for non-versioned endpoints (root, health)."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from blindgate.core.container import get_app_settings, get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status, and version.
    """
    settings = get_app_settings()
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check for monitoring and load balancers.

    Returns 503 when the database is unreachable.
    """
    if not await get_database().check_connection():
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "unreachable"},
        )
    return JSONResponse(content={"status": "healthy"})
