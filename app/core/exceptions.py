"""Error taxonomy for the intake pipeline.

Every error carries the HTTP status and the public message returned to the
caller. Diagnostic detail stays in the server logs.
"""

from typing import Dict, Optional

from fastapi import status


class IntakeError(Exception):
    """Base class for errors raised while handling a form submission."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.public_message
        super().__init__(self.message)

    def to_payload(self) -> Dict:
        return {"error": self.message}


class ValidationError(IntakeError):
    """A required field is missing or a value breaks a schema rule."""

    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Invalid form submission"

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors = errors or {}

    def to_payload(self) -> Dict:
        return {"error": self.message, "errors": self.errors}


class MethodError(IntakeError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    public_message = "Method not allowed"


class PersistenceError(IntakeError):
    """The store rejected or failed the insert."""

    public_message = "Failed to submit form"


class NotificationError(IntakeError):
    """The email provider failed or is not configured. Never surfaced to callers."""

    public_message = "Failed to send notification"


class UnexpectedError(IntakeError):
    public_message = "An unexpected error occurred"
