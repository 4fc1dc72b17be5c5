"""
Service error taxonomy.

Every error carries a client-safe message, a machine-readable error code and
the HTTP status it maps to. Routers turn these into HTTPExceptions.
"""

from fastapi import HTTPException, status


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str, error_code: str, status_code: int = 400):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={
                "error": self.error_code,
                "message": self.message,
            },
        )


class StorageError(ServiceError):
    """Raised when any persistence operation fails. Detail is logged, never returned."""

    def __init__(self):
        super().__init__(
            message="Database error",
            error_code="DATABASE_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class AuthError(ServiceError):
    """Raised for any authentication failure. The message never names the cause."""

    def __init__(self, message: str, error_code: str):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )


class InvalidCredentialsError(AuthError):
    """Unknown username or wrong password."""

    def __init__(self):
        super().__init__(message="Invalid credentials", error_code="INVALID_CREDENTIALS")


class UnauthorizedError(AuthError):
    """Missing or mismatched session token."""

    def __init__(self):
        super().__init__(message="Unauthorized", error_code="UNAUTHORIZED")


class NotificationError(Exception):
    """Raised by the email transport. Never surfaces as an HTTP error."""
