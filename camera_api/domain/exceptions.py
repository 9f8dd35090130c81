"""Domain error kinds raised by use cases and repositories.

Route handlers never build HTTP errors for these themselves; the API layer maps
each kind to a status code and the ``{"message", "error"}`` envelope.
"""
from typing import Optional


class DomainError(Exception):
    """Base class for all domain errors"""
    
    default_error = "Error"
    
    def __init__(self, message: str, error: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error or self.default_error


class InvalidCredentialsError(DomainError):
    default_error = "Invalid credentials"
    
    def __init__(self, message: str = "Invalid credentials", error: Optional[str] = None) -> None:
        super().__init__(message, error)


class ConflictError(DomainError):
    default_error = "Conflict"


class NotFoundError(DomainError):
    default_error = "Resource not found"


class BadRequestError(DomainError):
    default_error = "Bad request"


class UnauthorizedError(DomainError):
    default_error = "Unauthorized"
    
    def __init__(self, message: str = "Authentication required", error: Optional[str] = None) -> None:
        super().__init__(message, error)


class DownstreamError(DomainError):
    default_error = "Downstream failure"


class StorageError(DomainError):
    default_error = "Storage error"
