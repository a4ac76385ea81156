from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when the caller could not be identified."""

    status_code = 401
    default_message = "Authentication required"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403
    default_message = "Forbidden"


class InvalidCredentials(AuthenticationError):
    default_message = "Invalid credentials"


class MissingToken(AuthenticationError):
    default_message = "Access token required"


class InvalidToken(AuthenticationError):
    """Malformed, tampered or expired bearer token."""

    status_code = 403
    default_message = "Invalid token"


class Forbidden(AuthorizationError):
    default_message = "Admin access required"


class DuplicateEmail(ValidationError):
    default_message = "Email already exists"


class AlreadyCheckedIn(ValidationError):
    default_message = "Already checked in today"


class AlreadyCheckedOut(ValidationError):
    default_message = "Already checked out today"


class NoCheckInRecord(ValidationError):
    default_message = "No check-in record found for today"
