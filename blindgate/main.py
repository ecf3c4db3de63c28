"""FastAPI application entry point.

Wires trace middleware, CORS, RFC 9457 exception handlers, the system
router and the v1 identity routers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blindgate.core.container import get_app_settings, get_database, get_logger
from blindgate.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from blindgate.presentation.routers.api.v1 import v1_router
from blindgate.presentation.routers.api.v1.errors import register_exception_handlers
from blindgate.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    Startup logs the environment; shutdown disposes the engine pool.
    """
    settings = get_app_settings()
    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await get_database().close()
    get_logger().info("application_stopped")


def create_app() -> FastAPI:
    settings = get_app_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Anonymous identity, verification and session service",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-ID"],
    )
    # Added last so it runs first and every response carries a trace id
    app.add_middleware(TraceMiddleware)

    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(v1_router)
    return app


app = create_app()
