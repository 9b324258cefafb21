"""Global exception handlers that map domain exceptions to HTTP responses."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.errors import (
    ALREADY_PAID,
    DEPOSIT_TOO_LARGE,
    FORBIDDEN,
    INSUFFICIENT_FUNDS,
    INVALID_RANGE,
    NOT_FOUND,
    STORAGE_ERROR,
    UNAUTHORIZED,
    VALIDATION_ERROR,
    AlreadyPaidError,
    DepositTooLargeError,
    DomainValidationError,
    ForbiddenError,
    InsufficientFundsError,
    InvalidRangeError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
)
from app.schemas.error import ErrorResponse


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        VALIDATION_ERROR,
    )


def invalid_range_error_handler(
    _request: Request, exc: InvalidRangeError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        INVALID_RANGE,
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def already_paid_error_handler(_request: Request, exc: AlreadyPaidError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        ALREADY_PAID,
    )


def forbidden_error_handler(_request: Request, exc: ForbiddenError) -> JSONResponse:
    return _error_response(
        status.HTTP_403_FORBIDDEN,
        str(exc),
        FORBIDDEN,
    )


def unauthorized_error_handler(_request: Request, exc: UnauthorizedError) -> JSONResponse:
    return _error_response(
        status.HTTP_401_UNAUTHORIZED,
        str(exc),
        UNAUTHORIZED,
    )


def insufficient_funds_error_handler(
    _request: Request, exc: InsufficientFundsError
) -> JSONResponse:
    return _error_response(
        status.HTTP_409_CONFLICT,
        str(exc),
        INSUFFICIENT_FUNDS,
    )


def deposit_too_large_error_handler(
    _request: Request, exc: DepositTooLargeError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        DEPOSIT_TOO_LARGE,
    )


def storage_error_handler(_request: Request, exc: StorageError) -> JSONResponse:
    return _error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        str(exc),
        STORAGE_ERROR,
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(InvalidRangeError, invalid_range_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(AlreadyPaidError, already_paid_error_handler)
    app.add_exception_handler(ForbiddenError, forbidden_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
    app.add_exception_handler(InsufficientFundsError, insufficient_funds_error_handler)
    app.add_exception_handler(DepositTooLargeError, deposit_too_large_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
