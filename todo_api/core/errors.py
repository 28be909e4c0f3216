"""
Error taxonomy for the Todo API.

Every error carries the HTTP status it maps to; the app-level exception
handler renders it as ``{"error": <message>}``.  Pipeline steps return these
instances instead of raising them, so they are plain values until a gate
decides to raise.
"""

from __future__ import annotations

from fastapi import status


class TodoApiError(Exception):
    """Base class for every error the API reports to clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "bad request."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UsernameTaken(TodoApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username already exists"


class UserNotFound(TodoApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "user not found."


class AlreadyPro(TodoApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Pro plan is already activated."


class QuotaExceeded(TodoApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Active pro mode for register more than 10 todos."

    @classmethod
    def for_limit(cls, limit: int) -> QuotaExceeded:
        return cls(f"Active pro mode for register more than {limit} todos.")


class InvalidIdentifier(TodoApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "invalid user."


class TodoNotFound(TodoApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "todo not found."
