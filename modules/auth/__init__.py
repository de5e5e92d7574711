"""
Authentication module.

Handles JWT validation against Supabase Auth (the identity provider) and
maps sign-in failures to user-facing messages.

Public API:
- IAuthService: Interface for auth operations
- JWTPayload: Decoded token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
- describe_sign_in_error: provider error code -> message
"""

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    SIGN_IN_ERROR_MESSAGES,
    describe_sign_in_error,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    # Messages
    "SIGN_IN_ERROR_MESSAGES",
    "describe_sign_in_error",
]
