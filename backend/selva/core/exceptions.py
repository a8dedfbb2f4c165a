# selva/core/exceptions.py
from typing import Any, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    default_message = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"message": self.message}


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []

    def to_body(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class Unauthorized(AppError):
    status_code = 401
    default_message = "Invalid credentials"


class Forbidden(AppError):
    status_code = 403
    default_message = "Admin access only"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Conflict(AppError):
    status_code = 409
    default_message = "Already exists"


class ServerError(AppError):
    status_code = 500
    default_message = "Internal server error"
