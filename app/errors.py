"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
ALREADY_PAID = "ALREADY_PAID"
FORBIDDEN = "FORBIDDEN"
UNAUTHORIZED = "UNAUTHORIZED"
VALIDATION_ERROR = "VALIDATION_ERROR"
INVALID_RANGE = "INVALID_RANGE"
INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
DEPOSIT_TOO_LARGE = "DEPOSIT_TOO_LARGE"
STORAGE_ERROR = "STORAGE_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist or is outside the caller's scope."""

    pass


class AlreadyPaidError(NotFoundError):
    """Raised when a job was paid by a concurrent request between read and update."""

    pass


class ForbiddenError(DomainError):
    """Raised when the acting profile is not allowed to perform the operation."""

    pass


class UnauthorizedError(DomainError):
    """Raised when the request cannot be resolved to a profile."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. non-positive amounts)."""

    pass


class InvalidRangeError(DomainValidationError):
    """Raised when a reporting window starts after it ends."""

    pass


class InsufficientFundsError(DomainError):
    """Raised when a client's balance does not cover the job price."""

    pass


class DepositTooLargeError(DomainError):
    """Raised when a deposit exceeds the allowed share of the client's outstanding jobs."""

    pass


class StorageError(DomainError):
    """Raised when the database keeps failing after the internal retry."""

    pass
