"""
Service exceptions

AuthError, HealthError and BookingError each carry the canonical message,
the HTTP status code and the reason phrase of the failed call.
"""
from typing import Optional

import httpx

from .error_messages import ErrorMessages, format_status_error


class BookerServiceError(Exception):
    """Base error for booker API service calls"""

    def __init__(
        self,
        message: str = ErrorMessages.GENERIC.UNKNOWN,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status_text = status_text

    @classmethod
    def from_response(cls, message: str, response: httpx.Response) -> "BookerServiceError":
        """Create an error from a non-success response without reading its body"""
        return cls(
            format_status_error(message, response.status_code, response.reason_phrase),
            status_code=response.status_code,
            status_text=response.reason_phrase,
        )


class AuthError(BookerServiceError):
    """Credential exchange failed"""


class MissingTokenError(AuthError):
    """Credential exchange succeeded but the body carried no token"""

    def __init__(self, message: str = ErrorMessages.AUTH.NO_TOKEN, status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code)


class HealthError(BookerServiceError):
    """Liveness check failed"""


class BookingError(BookerServiceError):
    """Booking CRUD call failed or returned an invalid payload"""


__all__ = [
    "BookerServiceError",
    "AuthError",
    "MissingTokenError",
    "HealthError",
    "BookingError",
]
