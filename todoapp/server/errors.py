"""Errors raised by request handlers, each tied to an HTTP response."""

from __future__ import annotations

from http import HTTPStatus


class AppError(Exception):
    """Base error; subclasses fix the status code and response body."""

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
    public_message: str = "Internal Server Error"
    description: str = "Internal Server Error"

    def __str__(self) -> str:
        return self.description

    def to_response(self) -> tuple[str, int]:
        """Return the response body and status code."""
        return self.public_message, int(self.status)


class DatabaseError(AppError):
    public_message = "Database Error"

    def __init__(self, cause: Exception) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"Database error: {self.cause}"


class AuthenticationError(AppError):
    status = HTTPStatus.UNAUTHORIZED
    public_message = "Authentication Failed"
    description = "Authentication failed"


class UserNotFound(AppError):
    status = HTTPStatus.NOT_FOUND
    public_message = "User Not Found"
    description = "User not found"


class InvalidCredentials(AppError):
    status = HTTPStatus.UNAUTHORIZED
    public_message = "Invalid Credentials"
    description = "Invalid credentials"


class NotFound(AppError):
    status = HTTPStatus.NOT_FOUND
    public_message = "Not Found"
    description = "Item not found"


class InternalServerError(AppError):
    pass