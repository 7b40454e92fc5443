"""Global exception handlers that map domain exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from fulfilment.errors import (
    INTERNAL_ERROR,
    CapacityExceededError,
    ConflictError,
    DomainError,
    InvalidReferenceError,
    InvalidStateError,
    NotFoundError,
)
from fulfilment.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int, detail: str, code: str, exception_type: str | None = None
) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code, exception_type=exception_type)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _domain_error_response(status_code: int, exc: DomainError) -> JSONResponse:
    return _error_response(status_code, str(exc), exc.code)


def conflict_error_handler(_request: Request, exc: ConflictError) -> JSONResponse:
    return _domain_error_response(status.HTTP_409_CONFLICT, exc)


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _domain_error_response(status.HTTP_404_NOT_FOUND, exc)


def invalid_reference_error_handler(
    _request: Request, exc: InvalidReferenceError
) -> JSONResponse:
    return _domain_error_response(status.HTTP_404_NOT_FOUND, exc)


def capacity_exceeded_error_handler(
    _request: Request, exc: CapacityExceededError
) -> JSONResponse:
    return _domain_error_response(status.HTTP_400_BAD_REQUEST, exc)


def invalid_state_error_handler(_request: Request, exc: InvalidStateError) -> JSONResponse:
    return _domain_error_response(status.HTTP_400_BAD_REQUEST, exc)


def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while processing request")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc) or "Internal server error",
        INTERNAL_ERROR,
        exception_type=type(exc).__name__,
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(InvalidReferenceError, invalid_reference_error_handler)
    app.add_exception_handler(CapacityExceededError, capacity_exceeded_error_handler)
    app.add_exception_handler(InvalidStateError, invalid_state_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
