"""
Error types shared by services and endpoints.

Services raise ``ValidationError`` or ``NotFoundError``; endpoints
wrap anything unexpected in an ``InternalError`` carrying a generic,
operation specific message.  ``main.create_app`` registers a handler
that renders every ``ServiceError`` into the response envelope
``{"success": false, "message": ...}``.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """The record addressed by a lookup or delete does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ServiceError):
    """Unexpected failure; the message is generic and safe to expose."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
