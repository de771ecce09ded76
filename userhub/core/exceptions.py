"""Centralized, structured exception hierarchy for userhub.

Every error raised by the domain carries a machine-readable `code` for
programmatic handling and a human-readable `message` for logging and user
feedback. The API layer maps each class to an HTTP status code in
`userhub.core.handlers`.

Authentication failures are deliberately coarse: an unknown email and a wrong
password both raise `InvalidCredentialsError`, and an expired, tampered or
malformed token raises `InvalidTokenError`. Do not add finer-grained
subclasses for those cases.
"""

from __future__ import annotations

from typing import Final

__all__: Final = [
    "UserHubError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordMismatchError",
    "InvalidSecretError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "ValidationError",
    "InvalidUserDataError",
    "EmptyPasswordError",
    "DatabaseError",
]


class UserHubError(Exception):
    """Base exception class for all custom errors in the userhub application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Auth-related errors (typically map to 401 Unauthorized)
# ---------------------------------------------------------------------------


class AuthenticationError(UserHubError):
    """Raised for general authentication failures."""

    def __init__(self, message: str, code: str = "authentication_error"):
        super().__init__(message, code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password pair does not authenticate.

    Used for both unknown emails and wrong passwords so that callers cannot
    tell whether an account exists.
    """

    def __init__(self, message: str = "invalid credentials", code: str = "invalid_credentials"):
        super().__init__(message, code)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, expired, badly signed or names an
    unparseable user id."""

    def __init__(self, message: str = "invalid token", code: str = "invalid_token"):
        super().__init__(message, code)


class PasswordMismatchError(UserHubError):
    """Raised by the password hasher when a password does not match a hash.

    Malformed hashes raise the same error. The authentication service collapses
    it into `InvalidCredentialsError` before it reaches a caller.
    """

    def __init__(self, message: str = "password does not match", code: str = "password_mismatch"):
        super().__init__(message, code)


class InvalidSecretError(UserHubError):
    """Raised when tokens are requested but no signing secret is configured.

    This is an operational misconfiguration, not a client error. It maps to a
    `500 Internal Server Error` with a generic message.
    """

    def __init__(self, message: str = "invalid token secret", code: str = "invalid_token_secret"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Domain / persistence errors
# ---------------------------------------------------------------------------


class UserAlreadyExistsError(UserHubError):
    """Raised when a user with the same email already exists.

    Raised both by the services' pre-check and by the repositories' own
    uniqueness enforcement. Maps to a `409 Conflict`.
    """

    def __init__(self, message: str = "user already exists", code: str = "user_already_exists"):
        super().__init__(message, code)


class UserNotFoundError(UserHubError):
    """Raised when a requested user does not exist.

    Also raised by token validation when the token is cryptographically valid
    but its account has been removed since issuance. Maps to `404 Not Found`,
    except behind the bearer-token dependency where it becomes a 401.
    """

    def __init__(self, message: str = "user not found", code: str = "user_not_found"):
        super().__init__(message, code)


class DatabaseError(UserHubError):
    """Raised by the SQL repository for database driver failures.

    Maps to a `500 Internal Server Error`.
    """

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Validation errors (typically map to 400 Bad Request)
# ---------------------------------------------------------------------------


class ValidationError(UserHubError):
    """Raised for general data validation failures."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


class InvalidUserDataError(ValidationError):
    """Raised when a user cannot be built from the supplied fields."""

    def __init__(self, message: str = "invalid user data", code: str = "invalid_user_data"):
        super().__init__(message, code)


class EmptyPasswordError(InvalidUserDataError):
    """Raised when an empty password is handed to the password hasher."""

    def __init__(self, message: str = "password cannot be empty", code: str = "empty_password"):
        super().__init__(message, code)
