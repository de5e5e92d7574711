"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.

Sign-in failures reported by the identity provider on the client side
(popup blocked, provider disabled, ...) are not raised here; they are
mapped to user-facing text by describe_sign_in_error().
"""

from shared.exceptions import AuthenticationError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server has no JWT secret to validate tokens with."""

    def __init__(self):
        super().__init__("Server authentication not configured", code="AUTH_NOT_CONFIGURED")


DEFAULT_SIGN_IN_MESSAGE = "Failed to sign in. Please try again."

SIGN_IN_ERROR_MESSAGES: dict[str, str] = {
    "auth/operation-not-allowed": "Google Sign-In is not enabled. Please contact support.",
    "auth/popup-closed-by-user": "Sign-in cancelled. Please try again.",
    "auth/popup-blocked": "Pop-up blocked. Please allow pop-ups and try again.",
    "auth/unauthorized-domain": "This domain is not authorized for Google Sign-In.",
    "MISSING_TOKEN": "Please sign in to continue.",
    "INVALID_TOKEN": "Your session is invalid. Please sign in again.",
    "TOKEN_EXPIRED": "Your session has expired. Please sign in again.",
    "AUTH_NOT_CONFIGURED": "Sign-in is temporarily unavailable.",
}


def describe_sign_in_error(code: str) -> str:
    """Map an identity provider error code to a user-facing message."""
    return SIGN_IN_ERROR_MESSAGES.get(code, DEFAULT_SIGN_IN_MESSAGE)
