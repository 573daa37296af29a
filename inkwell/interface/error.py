"""Interface layer error handling.

Maps domain errors to HTTP responses. Every response body has the shape
``{"error": <error class name>, "message": <human readable text>}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from inkwell.domain.error import (
    AuthenticationRequiredError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

# Checked in order; subclasses inherit their parent's status
ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthenticationRequiredError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: DomainError) -> int:
    """Return the HTTP status for a domain error (400 when unmapped)."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with its mapped status."""
    status_code = status_for(exc)
    logfire.info(
        "Domain error",
        error=type(exc).__name__,
        message=str(exc),
        status_code=status_code,
        path=request.url.path,
    )
    return error_response(status_code, type(exc).__name__, str(exc))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort handler; never leaks internals."""
    logfire.error(
        "Unhandled error",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "InternalServerError",
        "Internal server error",
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
