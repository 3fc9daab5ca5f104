"""
Error types raised by the service layer.

Each error carries the HTTP status code and the message that the API
returns to the client as ``{"error": message}``.  Services raise these
directly; ``main.create_app`` installs the handler that renders them.
"""

from fastapi import status
from pydantic import ValidationError as PydanticValidationError


class APIError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(APIError):
    """Missing or incorrect credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied"


class InvalidCredential(APIError):
    """A token was presented but could not be verified."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid token"


class ValidationError(APIError):
    """A write was rejected because the document is missing or has invalid fields."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Validation failed"

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, label: str) -> "ValidationError":
        """Flatten pydantic's error list into a single readable message.

        ``label`` names the document, e.g. ``"Event"`` gives
        ``"Event validation failed: name: Field required"``.
        """
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ()))
            problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
        return cls(f"{label} validation failed: " + ", ".join(problems))


class DuplicateRegistration(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "You are already registered for this event"


class NotFound(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
