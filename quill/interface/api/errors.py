"""Exception handlers mapping domain errors to HTTP responses.

Routes let domain errors propagate; the handlers registered here turn them
into a status code and a `{"message": ...}` body. 4xx outcomes are logged
as warnings, anything that reaches the 500 handlers as errors.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from quill.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    NotFoundOrForbiddenError,
    UnauthenticatedError,
    ValidationError,
)

SERVER_ERROR_MESSAGE = "Server error"

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotFoundOrForbiddenError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def _message(exc: DomainError) -> str:
    if isinstance(exc, NotFoundError):
        # Identifiers stay in the logs, not in the response
        return f"{exc.resource} not found"
    return str(exc)


def _json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error into its HTTP status."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            logfire.warn(
                "Request failed",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return _json(status_code, _message(exc))

    # StoreError and any DomainError without a mapping
    logfire.error(
        "Request failed with server error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with the first problem."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(loc) for loc in first["loc"] if loc != "body")
        message = f"{field}: {first['msg']}" if field else first["msg"]
    else:
        message = "Invalid request"

    logfire.warn(
        "Request validation failed",
        method=request.method,
        path=request.url.path,
        errors=[str(e.get("msg")) for e in errors],
    )
    return _json(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: never leak internals to the client."""
    logfire.exception(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
    )
    return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI app."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
