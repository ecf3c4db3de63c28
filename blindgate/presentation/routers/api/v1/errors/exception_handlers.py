"""Global exception handlers for the FastAPI application.

Handlers:
    domain_error_handler: DomainErrorException (raised by auth dependencies)
    http_exception_handler: HTTPException / Starlette 404 and 405
    validation_exception_handler: RequestValidationError, rendered as 400
    generic_exception_handler: anything else, logged and rendered as 500
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blindgate.core.container import get_logger
from blindgate.core.enums import ErrorCode
from blindgate.core.errors import DomainError
from blindgate.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from blindgate.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
    problem_response,
    problem_type,
    status_title,
)
from blindgate.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class DomainErrorException(Exception):
    """Carries a DomainError out of a FastAPI dependency.

    Dependencies cannot return a response, so the auth dependencies raise
    this and ``domain_error_handler`` renders it like any handler Failure.
    """

    def __init__(self, error: DomainError) -> None:
        super().__init__(str(error))
        self.error = error


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainErrorException)
    return ErrorResponseBuilder.from_domain_error(exc.error, request)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPException (including routing 404/405) as Problem Details."""
    assert isinstance(exc, StarletteHTTPException)
    title = status_title(exc.status_code)
    problem = ProblemDetails(
        type=problem_type(title.lower().replace(" ", "-")),
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        trace_id=get_trace_id(),
    )
    return problem_response(problem, getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render request body validation errors as 400 with per-field errors."""
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "email"] -> "email"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=problem_type(ErrorCode.VALIDATION_FAILED.value),
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        code=ErrorCode.VALIDATION_FAILED.value,
        errors=field_errors or None,
        trace_id=get_trace_id(),
    )
    return problem_response(problem)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and answer 500 without internal details."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        path=str(request.url.path),
        method=request.method,
    )
    problem = ProblemDetails(
        type=problem_type("internal-server-error"),
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        trace_id=get_trace_id(),
    )
    return problem_response(problem)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainErrorException, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
