"""Custom domain exceptions for the warehouse rules."""

# Stable, machine-readable error codes for API consumers.
CONFLICT = "CONFLICT"
NOT_FOUND = "NOT_FOUND"
INVALID_REFERENCE = "INVALID_REFERENCE"
CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
INVALID_STATE = "INVALID_STATE"
INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    code: str = INTERNAL_ERROR


class ConflictError(DomainError):
    """Raised when a business-unit code is already taken."""

    code = CONFLICT


class NotFoundError(DomainError):
    """Raised when a requested warehouse does not exist."""

    code = NOT_FOUND


class InvalidReferenceError(DomainError):
    """Raised when a location identifier does not resolve."""

    code = INVALID_REFERENCE


class CapacityExceededError(DomainError):
    """Raised when a location ceiling (warehouse count or capacity) would be violated."""

    code = CAPACITY_EXCEEDED


class InvalidStateError(DomainError):
    """Raised when stock and capacity would become inconsistent."""

    code = INVALID_STATE
