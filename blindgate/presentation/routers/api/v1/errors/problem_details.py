"""RFC 9457 Problem Details for HTTP APIs.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 error response schema
"""

from pydantic import BaseModel, Field

PROBLEM_JSON = "application/problem+json"


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(field="email", code="value_error", message="Invalid email")
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details body.

    ``code`` carries the machine-readable ErrorCode value so clients can
    branch without parsing ``type``.

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/session_expired",
        ...     title="Authentication Required",
        ...     status=401,
        ...     detail="Session has expired. Please log in again.",
        ...     instance="/api/v1/auth/me",
        ...     code="session_expired",
        ...     trace_id="0190b2c4-7d3e-7f00-8000-000000000000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/invalid_domain"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/auth/company/verification-codes"],
    )
    code: str | None = Field(None, description="Machine-readable error code")
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(None, description="Request trace ID for debugging")
