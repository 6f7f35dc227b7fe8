"""
Error taxonomy for the application workflow.

Services raise these; the API layer turns them into JSON responses with the
matching HTTP status code (see ``register_exception_handlers`` in app.main).
"""
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to API clients."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_STATUS = "INVALID_STATUS"
    DUPLICATE_APPLICATION = "DUPLICATE_APPLICATION"
    NOT_FOUND = "NOT_FOUND"
    INVALID_OPERATION = "INVALID_OPERATION"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    CONCURRENT_UPDATE = "CONCURRENT_UPDATE"


class ATSError(Exception):
    """Base exception carrying an error code and an HTTP status."""

    code: ErrorCode = ErrorCode.VALIDATION_ERROR
    status_code: int = 400

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code.value}


class ValidationError(ATSError):
    """Malformed input; nothing was written."""
    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class InvalidStatus(ValidationError):
    """Requested status is not one of the known values."""
    code = ErrorCode.INVALID_STATUS


class DuplicateApplication(ATSError):
    code = ErrorCode.DUPLICATE_APPLICATION
    status_code = 409


class NotFound(ATSError):
    code = ErrorCode.NOT_FOUND
    status_code = 404


class InvalidOperation(ATSError):
    """Business rule violation, e.g. manual update of a technical application."""
    code = ErrorCode.INVALID_OPERATION
    status_code = 400


class Unauthorized(ATSError):
    code = ErrorCode.UNAUTHORIZED
    status_code = 401


class Forbidden(ATSError):
    """Actor's role may not use this surface."""
    code = ErrorCode.FORBIDDEN
    status_code = 403


class PersistenceFailure(ATSError):
    """The store rejected the write; the transaction was rolled back."""
    code = ErrorCode.PERSISTENCE_FAILURE
    status_code = 500


class ConcurrentUpdate(PersistenceFailure):
    """Another writer changed the record between our read and our write."""
    code = ErrorCode.CONCURRENT_UPDATE
    status_code = 409
