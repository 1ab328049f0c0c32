"""
Typed application errors.

Repositories and services raise these instead of HTTPException so they can be
used outside a request. The exception handlers registered in app.main turn
each one into its HTTP status and a uniform body:

- {"error": "<message>"} for single-message errors
- {"errors": [{"field": ..., "message": ...}]} for field validation errors
"""

from collections.abc import Iterable
from typing import Any

from fastapi import status

# Location prefixes FastAPI adds to request validation errors
_LOC_SOURCES = {"body", "query", "path", "header", "cookie"}


def field_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic/FastAPI error dicts into [{"field", "message"}]."""
    result = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if len(loc) > 1 and loc[0] in _LOC_SOURCES:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        result.append({"field": field, "message": error.get("msg", "Invalid value")})
    return result


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"error": self.message}


class FieldValidationError(AppError):
    """One or more input fields are missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        super().__init__(self.message)

    @classmethod
    def single(cls, field: str, message: str) -> "FieldValidationError":
        return cls([{"field": field, "message": message}])

    def to_body(self) -> dict:
        return {"errors": self.errors}


class InvalidId(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid ID"


class DuplicateEmail(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists with this email"


class InvalidOldPassword(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Old password is incorrect"


class Unauthenticated(AppError):
    """Missing, malformed, tampered or expired bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidToken(Unauthenticated):
    message = "Invalid or expired token"


class InvalidCredentials(AppError):
    """Login failed. Deliberately identical for every failure cause."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "You do not have permission to perform this action"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"
