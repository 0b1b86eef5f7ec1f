"""Application errors and their HTTP mapping.

Handlers in ``src.main`` turn every ``AppError`` into the response envelope
``{"status": ..., "message": ...}`` using ``status_code`` and ``status``.
"""

from fastapi import status as http_status


class AppError(Exception):
    """Base class for errors reported to API clients."""

    status_code = http_status.HTTP_500_INTERNAL_SERVER_ERROR
    status = "error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(AppError):
    """Required input is missing or malformed."""

    status_code = http_status.HTTP_400_BAD_REQUEST
    status = "fail"


class DuplicateEmailError(ValidationError):
    """A user with this email already exists."""

    def __init__(self, message: str = "Email already in use"):
        super().__init__(message)


class AuthenticationError(AppError):
    """Email/password pair did not match a user."""

    status_code = http_status.HTTP_400_BAD_REQUEST
    status = "fail"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class TokenMissingError(AppError):
    """No bearer token was sent with a protected request."""

    status_code = http_status.HTTP_401_UNAUTHORIZED
    status = "fail"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class TokenInvalidError(AppError):
    """The bearer token is malformed, tampered with or expired."""

    status_code = http_status.HTTP_403_FORBIDDEN
    status = "fail"

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class NotFoundError(AppError):
    """A requested record does not exist."""

    status_code = http_status.HTTP_404_NOT_FOUND
    status = "fail"


class InvalidIdentifierError(NotFoundError):
    """An id that can never match a record."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid identifier: {value}")


class InvalidTokenError(Exception):
    """Raised by the token service when a token cannot be verified."""
