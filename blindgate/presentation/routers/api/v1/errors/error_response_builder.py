"""Error response builder for RFC 9457 Problem Details.

Maps DomainError codes to HTTP statuses. Handlers and dependencies never
pick a status themselves.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from blindgate.core.container import get_app_settings
from blindgate.core.enums import ErrorCode
from blindgate.core.errors import DomainError, ValidationError
from blindgate.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from blindgate.presentation.routers.api.v1.errors.problem_details import (
    PROBLEM_JSON,
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DOMAIN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USE_COMPANY_VERIFICATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_OR_EXPIRED_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_OR_EXPIRED_TOKEN: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.SESSION_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_SUSPENDED: status.HTTP_403_FORBIDDEN,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.REGISTRATION_DISABLED: status.HTTP_403_FORBIDDEN,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EMAIL_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.USERNAME_TAKEN: status.HTTP_409_CONFLICT,
}

_TITLE_BY_STATUS: dict[int, str] = {
    400: "Bad Request",
    401: "Authentication Required",
    403: "Access Denied",
    404: "Resource Not Found",
    405: "Method Not Allowed",
    409: "Resource Conflict",
    500: "Internal Server Error",
}


def status_title(status_code: int) -> str:
    return _TITLE_BY_STATUS.get(status_code, "Error")


def problem_type(slug: str) -> str:
    """Problem type URI under the configured API base URL."""
    return f"{get_app_settings().api_base_url}/errors/{slug}"


def problem_response(
    problem: ProblemDetails, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_JSON,
        headers=headers,
    )


class ErrorResponseBuilder:
    """Build RFC 9457 responses from DomainError values.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def status_code_for(code: ErrorCode) -> int:
        """HTTP status for an error code (500 for anything unmapped)."""
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        status_code = ErrorResponseBuilder.status_code_for(error.code)
        problem = ProblemDetails(
            type=problem_type(error.code.value),
            title=status_title(status_code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            code=error.code.value,
            trace_id=get_trace_id(),
        )
        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return problem_response(problem, headers)
