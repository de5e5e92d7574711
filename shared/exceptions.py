"""
Base exception classes for the Streampass backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class StreampassError(Exception):
    """
    Base exception for all Streampass errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(StreampassError):
    """Resource not found."""

    pass


class ValidationError(StreampassError):
    """Input validation failed."""

    pass


class AuthenticationError(StreampassError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(StreampassError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(StreampassError):
    """A write collided with an existing record."""

    pass


class ExternalServiceError(StreampassError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class StoreError(ExternalServiceError):
    """A Supabase read or write failed."""

    def __init__(self, message: str, table: Optional[str] = None):
        super().__init__(
            message,
            service="supabase",
            code="STORE_ERROR",
            details={"table": table} if table else {},
        )


class DuplicateRecordError(ConflictError):
    """Raised when a unique constraint rejects an insert."""

    def __init__(self, table: str, message: str = "Record already exists"):
        super().__init__(
            message,
            code="DUPLICATE_RECORD",
            details={"table": table},
        )
