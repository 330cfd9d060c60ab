"""
Application error taxonomy.

Each error carries the HTTP status it maps to; the handlers in
app.api.errors turn them into JSON responses.
"""

from typing import Optional

from fastapi import status
from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"
NOT_NULL_VIOLATION = "23502"


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Missing or invalid request fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """Resource already exists (e.g. duplicate email)."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(AppError):
    """Constraint violation reported by the database."""

    def __init__(self, message: str, status_code: int, code: Optional[str] = None):
        super().__init__(message, status_code)
        self.code = code

    @classmethod
    def from_integrity_error(cls, exc: IntegrityError) -> "StorageError":
        """
        Classify an IntegrityError by SQLSTATE.

        PostgreSQL drivers expose the code on the wrapped DBAPI error
        (`pgcode` for psycopg2, `sqlstate` for psycopg 3). SQLite has no
        SQLSTATE, so its message text is used instead.
        """
        orig = exc.orig
        code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
        text = str(orig)

        if code == UNIQUE_VIOLATION or "UNIQUE constraint failed" in text:
            return cls("Duplicate entry", status.HTTP_409_CONFLICT, UNIQUE_VIOLATION)
        if code == NOT_NULL_VIOLATION or "NOT NULL constraint failed" in text:
            return cls("Missing required field", status.HTTP_400_BAD_REQUEST, NOT_NULL_VIOLATION)
        return cls("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR, code)


class NotificationError(AppError):
    """Mail dispatch failed. Logged by the notification service, never returned to clients."""
