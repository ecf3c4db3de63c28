"""RFC 9457 error responses and exception handlers."""

from blindgate.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from blindgate.presentation.routers.api.v1.errors.exception_handlers import (
    DomainErrorException,
    register_exception_handlers,
)
from blindgate.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "DomainErrorException",
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
